"""Infrastructure Services.

Concrete implementations of domain interfaces that talk to the outside world.

- Email: SMTP delivery of workflow notifications
"""

from .email_notifier import EmailNotifier

__all__ = ["EmailNotifier"]
