"""Interactive prompts used when a required argument is missing."""

from pathlib import Path

import click

from office_toolbox.cli.ensure import Ensure
from office_toolbox.cli.output import user_output
from office_toolbox.core.applications import APPLICATION_NAMES, get_profile
from office_toolbox.core.context import ToolboxContext
from office_toolbox.core.manifest_ops import list_manifest_paths

COMMAND_CHOICES = (
    ("list", "List registered developer manifests"),
    ("sideload", "Sideload a manifest"),
    ("remove", "Remove a manifest"),
    ("validate", "Validate a manifest"),
)

_BROWSE = "Browse for a developer manifest from the current directory"
_TYPE_PATH = "Specify the path to a developer manifest"
_REGISTERED = "Choose a registered developer manifest"


def choose(message: str, choices: list[str]) -> str:
    """Show a numbered menu and return the selected choice."""
    user_output(message)
    for index, choice in enumerate(choices, start=1):
        user_output(f"  {index}) {choice}")
    selection = click.prompt("Selection", type=click.IntRange(1, len(choices)), err=True)
    return choices[selection - 1]


def prompt_for_command() -> str:
    """Ask which top-level action to run; returns the command name."""
    descriptions = [description for _, description in COMMAND_CHOICES]
    selected = choose("What do you want to do?", descriptions)
    return COMMAND_CHOICES[descriptions.index(selected)][0]


def prompt_for_application() -> str:
    labels = {"powerpoint": "PowerPoint", "onenote": "OneNote"}
    choices = [labels.get(name, name.capitalize()) for name in APPLICATION_NAMES]
    return choose("Which application are you targeting?", choices).lower()


def ensure_application(application: str | None) -> str:
    """Return a known application name, prompting when none or an unknown one was given."""
    if application is not None and get_profile(application) is not None:
        return application.lower()
    user_output("A valid application must be specified.")
    return prompt_for_application()


def strip_quotes(text: str) -> str:
    """Remove one pair of surrounding double quotes, as pasted from a file manager."""
    if len(text) >= 2 and text.startswith('"') and text.endswith('"'):
        return text[1:-1]
    return text


def prompt_for_manifest_path() -> Path:
    answer = click.prompt("Specify the path to the XML manifest file", err=True)
    return Path(strip_quotes(answer.strip()))


def items_in_directory(directory: Path) -> list[str]:
    """XML files first, then ".." and subdirectories, as offered by the browser."""
    manifests: list[str] = []
    directories = [".."]
    for item in sorted(directory.iterdir()):
        if item.is_dir():
            directories.append(item.name)
        elif item.suffix == ".xml":
            manifests.append(item.name)
    return manifests + directories


def prompt_for_manifest_from_directory(start: Path) -> Path:
    """Let the user walk the directory tree from start until a file is chosen."""
    current = start
    while current.is_dir():
        current = current.resolve()
        choice = choose(str(current), items_in_directory(current))
        current = current / choice
    return current


def prompt_for_registered_manifest(ctx: ToolboxContext, application: str | None) -> Path:
    if application is None and ctx.registry.is_per_application:
        application = prompt_for_application()

    paths = Ensure.not_empty(
        [str(path) for path in list_manifest_paths(ctx, application)],
        "There are no registered manifests to choose from.",
    )
    return Path(choose("Choose a manifest:", paths))


def check_and_prompt_for_path(
    ctx: ToolboxContext, application: str | None, manifest_path: str | None
) -> Path:
    """Return the given manifest path, or ask the user how to pick one."""
    if manifest_path:
        return Path(manifest_path)

    user_output("The path must be specified for the manifest.")
    method = choose(
        "Would you like to specify the path to a developer manifest "
        "or choose one that you have already registered?",
        [_BROWSE, _TYPE_PATH, _REGISTERED],
    )
    if method == _BROWSE:
        return prompt_for_manifest_from_directory(ctx.cwd)
    if method == _TYPE_PATH:
        return prompt_for_manifest_path()
    return prompt_for_registered_manifest(ctx, application)
