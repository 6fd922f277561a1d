"""
Recipe authorization policy.

Pure functions over already loaded state. Services load the recipe and its
secondary authors, then ask these functions; nothing here touches storage.

An anonymous viewer (user is None) is treated as a public-tier user who is
not an author.
"""

from typing import Iterable, Optional

from shared.models import AuthenticatedUser

from .models import Collaborator, Recipe


def find_collaborator(
    user: Optional[AuthenticatedUser],
    collaborators: Iterable[Collaborator],
) -> Optional[Collaborator]:
    """Return the user's secondary-author entry, if any."""
    if user is None:
        return None
    for collaborator in collaborators:
        if collaborator.user_id == user.id:
            return collaborator
    return None


def is_author(user: Optional[AuthenticatedUser], recipe: Recipe) -> bool:
    return user is not None and user.id == recipe.author_id


def can_view(
    user: Optional[AuthenticatedUser],
    recipe: Recipe,
    collaborators: Iterable[Collaborator],
) -> bool:
    """
    Whether the user may see the recipe.

    Authors and secondary authors always can. Everyone else needs the recipe
    to be public, and a premium recipe additionally needs a premium viewer.
    """
    if is_author(user, recipe) or find_collaborator(user, collaborators) is not None:
        return True
    if not recipe.is_public:
        return False
    return not recipe.is_premium or (user is not None and user.is_premium)


def can_modify(
    user: Optional[AuthenticatedUser],
    recipe: Recipe,
    collaborators: Iterable[Collaborator],
) -> bool:
    """Author, or a secondary author granted can_modify."""
    if is_author(user, recipe):
        return True
    collaborator = find_collaborator(user, collaborators)
    return collaborator is not None and collaborator.can_modify


def can_delete(user: Optional[AuthenticatedUser], recipe: Recipe) -> bool:
    """Only the primary author may delete a recipe."""
    return is_author(user, recipe)
