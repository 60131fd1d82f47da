class CustomMessageException(Exception):
    def __init__(self, messages: str | list[str], status_code: int = 400) -> None:
        super().__init__(messages)
        if isinstance(messages, str):
            messages = [messages]

        self.messages = messages
        self.status_code = status_code
