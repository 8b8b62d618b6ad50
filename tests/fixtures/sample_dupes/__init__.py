class Notifier:
    def notify(self, message: str) -> str:
        return f"sent {message}"
