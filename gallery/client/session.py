"""Signed-in user as seen by the client."""

from gallery.domain.model import Comment
from gallery.domain.value import UserId, UserRole
from gallery.domain.value.common import ValueObject


class CurrentUser(ValueObject):
    """Identity of the signed-in user, supplied by the session provider."""

    id: UserId
    name: str
    role: UserRole = UserRole.USER

    @property
    def is_admin(self) -> bool:
        return self.role == UserRole.ADMIN

    def can_delete(self, comment: Comment) -> bool:
        """Whether to offer the delete control for ``comment``.

        Admins may delete anything; others only comments posted under their
        own name. The server does not repeat this check.
        """
        return self.is_admin or comment.author == self.name
