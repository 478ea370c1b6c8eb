from flask_login import UserMixin
from ..extensions import login_manager


class Owner(UserMixin):
    """The one account behind the shared password; never persisted."""

    id = "owner"


@login_manager.user_loader
def load_user(user_id):
    if user_id == Owner.id:
        return Owner()
    return None
