"""String lookup port. Interface to the platform resource system."""

from typing import Protocol

from user_switcher.domain.resources import ResourceId


class StringLookupPort(Protocol):
    """Port for resolving localized strings.

    Implementations must be synchronous and free of side effects visible
    to the caller.
    """

    def get_string(self, resource_id: ResourceId) -> str:
        """Resolve a string resource to its localized text.

        Parameters
        ----------
        resource_id
            Identifier of a string resource

        Returns
        -------
        The localized text

        Raises
        ------
        ResourceNotFoundError
            If the identifier cannot be resolved
        """
        ...
