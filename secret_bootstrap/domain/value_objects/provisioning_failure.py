"""Provisioning failure reason value object."""

from enum import StrEnum, auto


class ProvisioningFailureReason(StrEnum):
    """Why a client secret could not be provisioned."""

    # Missing and not-visible-to-caller look the same through Graph
    APPLICATION_NOT_FOUND = auto()
    EMPTY_RESULT = auto()

    def __str__(self) -> str:
        return self.value
