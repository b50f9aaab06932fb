"""Account and social-graph commands."""

from .register_user import RegisterUserCommand, RegisterUserHandler, AuthResult
from .login_user import LoginUserCommand, LoginUserHandler
from .update_profile import UpdateProfileCommand, UpdateProfileHandler
from .follow_user import FollowUserCommand, FollowUserHandler
from .unfollow_user import UnfollowUserCommand, UnfollowUserHandler

__all__ = [
    "AuthResult",
    "RegisterUserCommand",
    "RegisterUserHandler",
    "LoginUserCommand",
    "LoginUserHandler",
    "UpdateProfileCommand",
    "UpdateProfileHandler",
    "FollowUserCommand",
    "FollowUserHandler",
    "UnfollowUserCommand",
    "UnfollowUserHandler",
]
