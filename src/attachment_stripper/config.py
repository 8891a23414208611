"""Configuration management for the attachment stripper."""

import os
from dataclasses import dataclass
from email import policy as email_policy
from email.policy import Policy

# Parsing policies accepted by STRIPPER_MESSAGE_POLICY
POLICIES: dict[str, Policy] = {
    "compat32": email_policy.compat32,
    "default": email_policy.default,
    "SMTP": email_policy.SMTP,
    "HTTP": email_policy.HTTP,
}


@dataclass
class StripperConfig:
    """Stripper configuration, optionally loaded from environment variables."""

    # Placed between inline text fragments when the body is rebuilt
    body_separator: str = ""

    # email.policy used when parsing raw messages
    message_policy: str = "compat32"

    def policy(self) -> Policy:
        """Return the email.policy object named by message_policy.

        Raises:
            ValueError: If message_policy is not a known policy name
        """
        try:
            return POLICIES[self.message_policy]
        except KeyError:
            raise ValueError(
                f"Unknown message policy {self.message_policy!r}, "
                f"expected one of: {', '.join(POLICIES)}"
            ) from None

    @classmethod
    def from_env(cls) -> "StripperConfig":
        """Load configuration from environment variables.

        Unset variables fall back to the dataclass defaults.

        Returns:
            StripperConfig: Configuration object

        Raises:
            ValueError: If STRIPPER_MESSAGE_POLICY names an unknown policy
        """
        config = cls(
            body_separator=os.getenv("STRIPPER_BODY_SEPARATOR", ""),
            message_policy=os.getenv("STRIPPER_MESSAGE_POLICY", "compat32"),
        )

        # Fail at load time rather than on first parse
        config.policy()

        return config
