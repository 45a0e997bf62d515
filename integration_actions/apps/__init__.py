"""App clients: thin per-provider HTTP collaborators used by the actions."""

from .sendgrid import SendGridApp
from .webflow import WebflowApp

__all__ = ["SendGridApp", "WebflowApp"]
