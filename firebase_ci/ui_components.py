"""
firebase-ci - UI Components
Standardized command headers
"""

from rich.console import Console

LOGO = "firebase-ci"

# Color scheme
BRAND_COLOR = "color(214)"


def show_header(
    title: str,
    project: str = None,
    branch: str = None,
    details: dict = None,
    console: Console = None,
):
    """
    Display a standardized firebase-ci command header.

    Args:
        title: Main title (e.g., "Deploy", "Create Config")
        project: Project alias (if applicable)
        branch: Branch name (if applicable)
        details: Additional key-value pairs to display
        console: Rich Console instance (creates new if None)

    Example:
        show_header(
            title="Deploy",
            project="prod",
            branch="master",
            details={"Only": "hosting"}
        )
    """
    if console is None:
        console = Console()

    prefix = f" [bold {BRAND_COLOR}]{LOGO}[/bold {BRAND_COLOR}] [dim]›[/dim]"

    console.print(f"{prefix} [bold white]{title}[/bold white]")

    if branch:
        console.print(f"{prefix} Branch: [cyan]{branch}[/cyan]")
    if project:
        console.print(f"{prefix} Project: [cyan]{project}[/cyan]")

    if details:
        for key, value in details.items():
            console.print(f"{prefix} {key}: [cyan]{value}[/cyan]")

    console.print()
