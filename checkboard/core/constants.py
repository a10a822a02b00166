# checkboard/core/constants.py
from enum import Enum


class CheckStatus(str, Enum):
    PASSED = "passed"
    FAILED = "failed"
    UNKNOWN = "unknown"


class SeverityLevel(str, Enum):
    CRITICAL = "critical"
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"
    INFO = "info"


class CheckType(str, Enum):
    """Check kinds with a validator, keyed by the check's code name"""
    GITHUB_ORG_MFA = "githubOrgMFA"
    SOFTWARE_DESIGN_TRAINING = "softwareDesignTraining"

