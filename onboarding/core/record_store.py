"""Abstract interface for the user record store.

The record store holds one UserRecord per user ID. Writes use overwrite
semantics; concurrent writers for the same key are not coordinated and the
last write wins.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional

from onboarding.models import UserRecord


class RecordStore(ABC):
    """Keyed store of user records.

    Implementations:
        - DynamoDBRecordStore: AWS DynamoDB table keyed by ``userId``
        - MockRecordStore: In-memory for testing
    """

    @abstractmethod
    def get_user(self, user_id: str) -> Optional[UserRecord]:
        """Get the record for a user.

        Args:
            user_id: The user identifier

        Returns:
            UserRecord if found, None otherwise

        Raises:
            UpstreamError: On store errors
        """

    @abstractmethod
    def put_user(self, record: UserRecord) -> None:
        """Create or overwrite a user record.

        Args:
            record: The full record to store

        Raises:
            UpstreamError: On store errors
        """

    @abstractmethod
    def update_email(self, user_id: str, email: str, updated_at: str) -> UserRecord:
        """Set the email and updatedAt attributes of a record.

        Only the two attributes are written; other attributes such as
        createdAt are left untouched.

        Args:
            user_id: The user identifier
            email: The new email address
            updated_at: ISO-8601 timestamp of the change

        Returns:
            The record after the update

        Raises:
            UpstreamError: On store errors
        """
