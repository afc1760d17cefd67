from flask_login import UserMixin


class Identity(UserMixin):
    """A user vouched for by the upstream auth service; nothing is stored."""

    def __init__(self, user_id: str):
        self.id = user_id

    def __repr__(self):
        return f'<Identity {self.id}>'
