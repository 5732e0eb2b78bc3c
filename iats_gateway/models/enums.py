"""Enumerations for the iATS gateway domain model."""

from enum import Enum


class ServerId(str, Enum):
    """Regional iATS servers."""

    NA = "NA"  # North America
    UK = "UK"


class ResponseStatus(str, Enum):
    """Values of the STATUS element in an iATS response."""

    SUCCESS = "Success"
    FAILURE = "Failure"


class MethodOfPayment(str, Enum):
    """Card brands accepted by iATS (the MOP field)."""

    VISA = "VISA"
    MC = "MC"
    AMX = "AMX"
    DSC = "DSC"
    MAESTRO = "MAESTRO"
    VISA_DEBIT = "VISA DEBIT"
    MC_DEBIT = "MC DEBIT"
