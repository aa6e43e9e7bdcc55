"""Clean error display for resolution failures."""

import sys

from rich.console import Console
from rich.panel import Panel
from rich.text import Text

from ..errors import BaseNotResolvable
from ..errors import DuplicateOrAmbiguousOutput
from ..errors import DuplicatePackageName
from ..errors import EntryFileNotFound
from ..errors import ManifestError
from ..errors import ManifestParseError
from ..errors import ManifestReadError
from ..errors import MissingConditionEntry
from ..errors import MissingEntryPoint
from ..errors import MissingPackageName
from ..errors import ModuleReadError
from ..errors import ResolutionError
from ..errors import SettingsError
from ..errors import SpecifierError
from ..errors import UnresolvedExportTarget
from ..errors import UnresolvedRelativePath
from ..errors import UnsupportedIdentity

_TITLES: dict[type, str] = {
    ManifestReadError: "Manifest Unreadable",
    ManifestParseError: "Invalid Manifest",
    MissingPackageName: "Package Has No Name",
    MissingEntryPoint: "Package Has No Entry Point",
    MissingConditionEntry: "Export Has No Usable Condition",
    UnresolvedExportTarget: "Entry Point Not Found",
    DuplicatePackageName: "Duplicate Package Name",
    BaseNotResolvable: "Cannot Resolve From Virtual Module",
    UnresolvedRelativePath: "Import Not Found",
    UnsupportedIdentity: "Cannot Load Module",
    ModuleReadError: "Cannot Load Module",
    EntryFileNotFound: "Entry File Not Found",
    DuplicateOrAmbiguousOutput: "Ambiguous Bundle Output",
    SettingsError: "Invalid Settings",
}


def display_resolution_error(console: Console, error: Exception, verbose: bool = False) -> bool:
    """Display a ResolutionError with clean Rich formatting.

    Args:
        console: Rich console for output
        error: The error to display
        verbose: If True, also print traceback

    Returns:
        True if error was handled as a resolution error, False if not (caller should handle)
    """
    if not isinstance(error, ResolutionError):
        return False

    title = _TITLES.get(type(error), "Resolution Failed")

    content = Text()
    for label, value in _context_rows(error):
        content.append(f"{label}: ", style="dim")
        content.append(str(value), style="bold cyan")
        content.append("\n")
    if content.plain:
        content.append("\n")
    content.append(str(error), style="white")

    console.print()
    console.print(
        Panel(
            content,
            title=f"[bold red]{title}[/bold red]",
            border_style="red",
            padding=(1, 2),
        )
    )

    console.print(f"[dim]Tip: {_get_actionable_tip(error)}[/dim]")
    console.print()

    if verbose:
        console.print("[dim]─── Traceback ───[/dim]")
        if sys.exc_info()[0] is not None:
            console.print_exception()

    return True


def _context_rows(error: ResolutionError) -> list[tuple[str, object]]:
    """Pick the attributes worth showing for each error family."""
    rows: list[tuple[str, object]] = []
    if isinstance(error, ManifestError) and error.manifest_path is not None:
        rows.append(("Manifest", error.manifest_path))
    if isinstance(error, MissingConditionEntry):
        rows.append(("Subpath", error.subpath))
    if isinstance(error, UnresolvedExportTarget):
        rows.append(("Target", error.target))
    if isinstance(error, DuplicatePackageName):
        rows.append(("Name", error.name))
        if error.previous is not None:
            rows.append(("Previous", error.previous))
    if isinstance(error, SpecifierError):
        rows.append(("Specifier", error.specifier))
        rows.append(("Imported from", error.base))
    if isinstance(error, (UnsupportedIdentity, ModuleReadError)):
        rows.append(("Module", error.identity))
    if isinstance(error, EntryFileNotFound):
        rows.append(("Entry", error.path))
    if isinstance(error, SettingsError) and error.path is not None:
        rows.append(("Settings", error.path))
    return rows


def _get_actionable_tip(error: ResolutionError) -> str:
    """Generate an actionable tip based on the error."""
    if isinstance(error, MissingPackageName):
        return "Add a \"name\" field to the package.json."

    if isinstance(error, MissingEntryPoint):
        return "Declare \"exports\", or one of \"browser\", \"module\", \"main\" in the package.json."

    if isinstance(error, MissingConditionEntry):
        return "Give the export an \"import\" or \"default\" target; other conditions are not supported."

    if isinstance(error, UnresolvedExportTarget):
        return "Check that the entry point file exists relative to the package directory."

    if isinstance(error, DuplicatePackageName):
        return "Remove one of the packages, or set on_duplicate: replace to let the last one win."

    if isinstance(error, UnresolvedRelativePath):
        return "Imports must name the file exactly, including its extension."

    if isinstance(error, BaseNotResolvable):
        return "Only package names can be imported from virtual modules."

    if isinstance(error, (ManifestReadError, ManifestParseError)):
        return "Fix the package.json so it is a readable JSON object."

    if isinstance(error, SettingsError):
        return "Fix the settings YAML, or override the value on the command line."

    return "Review the paths above and try again."
