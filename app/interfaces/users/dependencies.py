"""
Dependency injection for the users bounded context.

The service and its store are built once by the application factory and
kept on ``app.state``; each request borrows that single instance.
"""

from fastapi import Request

from app.application.users.user_service import UserService


def get_user_service(request: Request) -> UserService:
    """Return the UserService wired into this application."""
    return request.app.state.user_service
