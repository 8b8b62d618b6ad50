"""Package that runs a command line program as ``python -m cli_app``."""

MAIN_RAN = False


class Printer:
    def render(self, text: str) -> str:
        return text.upper()
