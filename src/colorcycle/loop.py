import os

os.environ["PYGAME_HIDE_SUPPORT_PROMPT"] = "1"

import typer

from colorcycle.cli.commands.run import run_command

app = typer.Typer()


@app.callback()
def callback() -> None:
    """Animate a hue-cycling overlay across a static image."""


app.command(name="run")(run_command)


def main() -> None:
    app()


if __name__ == "__main__":
    main()
