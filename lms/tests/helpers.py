from django.contrib.auth.models import User
from rest_framework_simplejwt.tokens import AccessToken

from backend.custom_auth import ACCESS_COOKIE
from lms.access.roles import Role


def create_user(username, role=Role.STUDENT, password="password", display_name="", **extra):
    """Create a user with a role on the automatically created profile."""
    user = User.objects.create_user(
        username=username,
        email=extra.pop("email", f"{username}@devmastery.com"),
        password=password,
        **extra,
    )
    profile = user.profile
    profile.role = role
    profile.display_name = display_name
    profile.save()
    return user


def authenticate(client, user):
    """Put a valid access token for ``user`` into the client's cookie jar."""
    client.cookies[ACCESS_COOKIE] = str(AccessToken.for_user(user))
    return client
