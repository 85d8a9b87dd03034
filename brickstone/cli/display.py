"""Startup screen shown by the `brickstone` command."""

import qrcode
from rich.align import Align
from rich.console import Console
from rich.table import Table

from brickstone import __version__

console = Console()

LOGO = r"""
█████   █████   ██   ████  ██  ██   ████  ██████   ████   ██  ██  ██████
██  ██  ██  ██  ██  ██     ██ ██   ██       ██    ██  ██  ███ ██  ██
█████   █████   ██  ██     ████     ███     ██    ██  ██  ██ ███  ████
██  ██  ██  ██  ██  ██     ██ ██      ██    ██    ██  ██  ██  ██  ██
█████   ██  ██  ██   ████  ██  ██  ████     ██     ████   ██  ██  ██████
"""

TAGLINE = "REALTY GROUP  ·  NEW YORK CITY RENTALS"

LOGO_COLORS = ["bold bright_yellow", "bright_yellow", "yellow", "dark_orange", "orange3"]

# Upper/lower half blocks: one character cell holds two QR rows
_HALF_BLOCKS = {
    (False, False): " ",
    (True, False): "▀",
    (False, True): "▄",
    (True, True): "█",
}


def _shade_lines(lines: list[str], colors: list[str]) -> list[str]:
    """Color each line, repeating the last color for any extra lines."""
    styled = []
    for index, line in enumerate(lines):
        color = colors[index] if index < len(colors) else colors[-1]
        styled.append(f"[{color}]{line}[/{color}]")
    return styled


def get_qr_code(url: str) -> str:
    """Render a QR code for the URL as half-block text.

    Dark modules are drawn light so the code scans on a dark terminal.
    """
    qr = qrcode.QRCode(error_correction=qrcode.constants.ERROR_CORRECT_L, border=1)
    qr.add_data(url)
    qr.make(fit=True)

    matrix = [[not cell for cell in row] for row in qr.get_matrix()]
    if len(matrix) % 2:
        matrix.append([False] * len(matrix[0]))

    rows = []
    for top, bottom in zip(matrix[::2], matrix[1::2]):
        rows.append("".join(_HALF_BLOCKS[(t, b)] for t, b in zip(top, bottom)))
    return "\n".join(rows)


def local_url(host: str, port: int) -> str:
    """URL a browser on this machine (or LAN) can open."""
    display_host = "localhost" if host in ("127.0.0.1", "0.0.0.0", "::") else host
    return f"http://{display_host}:{port}"


def build_startup_table(
    url: str,
    public_url: str,
    mail_transport: str,
    allowed_origins: list[str],
) -> Table:
    """Logo and site details on the left, QR code of the local URL on the right."""
    if mail_transport == "smtp":
        mail_status = "[green]●[/green] MAIL: SMTP DELIVERY"
    else:
        mail_status = "[yellow]●[/yellow] MAIL: LOG ONLY (enquiries are not delivered)"

    details = [
        *_shade_lines(LOGO.strip("\n").splitlines(), LOGO_COLORS),
        f"[dim]v{__version__}[/dim]",
        "",
        f"[bright_magenta]{TAGLINE}[/bright_magenta]",
        "",
        mail_status,
        f"[bold cyan]{url}[/bold cyan]",
        f"[dim]public: {public_url}[/dim]",
        f"[dim]origins: {', '.join(allowed_origins)}[/dim]",
        "[dim]Ctrl+C to stop[/dim]",
    ]

    table = Table.grid(padding=(0, 4))
    table.add_column(vertical="middle")
    table.add_column(vertical="middle")
    table.add_row("\n".join(details), get_qr_code(url))
    return table


def display_startup_screen(
    url: str,
    public_url: str,
    mail_transport: str,
    allowed_origins: list[str],
) -> None:
    """Print the startup screen so the site can be opened from a phone.

    Args:
        url: Local URL the server is reachable at.
        public_url: Public site URL from config.
        mail_transport: Configured mail transport name.
        allowed_origins: Origins accepted by the contact endpoint.
    """
    table = build_startup_table(url, public_url, mail_transport, allowed_origins)
    console.print()
    console.print(Align.center(table))
    console.print()
