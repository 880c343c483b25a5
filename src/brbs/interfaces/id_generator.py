"""Port for minting ids of documents the site creates itself.

Only the forum writes new documents (posts and replies); everything else
arrives with ids from the dataset.
"""

import abc

# pylint: disable=too-few-public-methods


class IdGenerator(abc.ABC):
    """Source of `_id` values for new forum posts and replies.

    Ids are opaque strings, unique within the document store. Adapters
    should hand them out in creation order where they can.
    """

    @abc.abstractmethod
    def new_id(self) -> str:
        """Return an id no earlier call has returned."""
