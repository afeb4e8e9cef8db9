"""Exceptions raised while dispatching compose requests."""

from __future__ import annotations


class MailClientError(RuntimeError):
    """Raised when the system cannot open a mail composer."""


class HookUnsupportedError(MailClientError):
    """Raised when a caller asks to be notified once the mail is sent."""

    def __init__(self, hook: object) -> None:
        super().__init__(
            f"Send hooks are not supported by external mail clients: {hook!r}"
        )
        self.hook = hook


class NoMUAError(MailClientError):
    """Raised when no launcher could open the default mail client."""

    def __init__(self, uri: str) -> None:
        super().__init__(f"No mail client could be found to open {uri}")
        self.uri = uri


class FallbackNotConfiguredError(MailClientError):
    """Raised when a complex request arrives and no fallback is set."""

    def __init__(self) -> None:
        super().__init__(
            "This request needs a full mail user agent, but no fallback is configured."
        )


class FallbackLoopError(MailClientError):
    def __init__(self, name: str) -> None:
        super().__init__(f"The fallback mail user agent '{name}' points back to itself.")
        self.name = name


class FallbackMisconfiguredError(MailClientError):
    def __init__(self, name: str) -> None:
        super().__init__(
            f"The fallback mail user agent '{name}' has no compose operation registered."
        )
        self.name = name


class UnknownLauncherError(MailClientError, ValueError):
    """Raised when the configured launcher order names an unknown launcher."""
