"""Simple logging helpers for the CLAP orchestrator CLI."""


class Colors:
    """ANSI color codes for terminal output."""
    HEADER = '\033[95m'
    BLUE = '\033[94m'
    CYAN = '\033[96m'
    GREEN = '\033[92m'
    YELLOW = '\033[93m'
    RED = '\033[91m'
    RESET = '\033[0m'
    BOLD = '\033[1m'
    DIM = '\033[2m'


_BANNER_WIDTH = 48


def print_banner(title: str, color: str = Colors.BLUE) -> None:
    """Print a boxed title, e.g. the command banner or the validation result."""
    print(f"{color}╔{'═' * _BANNER_WIDTH}╗{Colors.RESET}")
    print(f"{color}║   {title:<{_BANNER_WIDTH - 3}}║{Colors.RESET}")
    print(f"{color}╚{'═' * _BANNER_WIDTH}╝{Colors.RESET}")
    print()


def print_header(msg: str) -> None:
    """Print a header message."""
    print(f"{Colors.HEADER}{Colors.BOLD}{msg}{Colors.RESET}")


def print_info(msg: str) -> None:
    """Print an info message."""
    print(f"{Colors.CYAN}{msg}{Colors.RESET}")


def print_success(msg: str) -> None:
    """Print a success message."""
    print(f"{Colors.GREEN}✓ {msg}{Colors.RESET}")


def print_warning(msg: str) -> None:
    """Print a warning message."""
    print(f"{Colors.YELLOW}⚠️  {msg}{Colors.RESET}")


def print_error(msg: str) -> None:
    """Print an error message."""
    print(f"{Colors.RED}❌ {msg}{Colors.RESET}")


def print_command(cmd: str) -> None:
    """Print a shell command the operator is expected to run next."""
    print(f"   {Colors.GREEN}{cmd}{Colors.RESET}")
