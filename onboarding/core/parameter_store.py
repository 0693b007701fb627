"""Abstract interface for the path-keyed parameter store."""

from __future__ import annotations

from abc import ABC, abstractmethod


class ParameterStore(ABC):
    """Path-keyed string store.

    Used as the source of a new user's email address during onboarding and as
    a mirrored copy of the record store's email after an update.

    Implementations:
        - SSMParameterStore: AWS Systems Manager Parameter Store
        - MockParameterStore: In-memory for testing
    """

    @abstractmethod
    def get_parameter(self, name: str) -> str:
        """Read a string parameter.

        Args:
            name: Full parameter path

        Returns:
            The parameter value

        Raises:
            ParameterNotFoundError: If the parameter does not exist
            UpstreamError: On store errors
        """

    @abstractmethod
    def put_parameter(self, name: str, value: str, overwrite: bool = True) -> None:
        """Write a string parameter.

        Args:
            name: Full parameter path
            value: Value to store
            overwrite: Replace an existing value

        Raises:
            UpstreamError: On store errors
        """
