"""Options for creating sessions."""

from dataclasses import dataclass
from typing import List, Optional


@dataclass
class NewSessionOptions:
    """Options passed to ``new_session``."""

    # Name of the initial window
    window_name: Optional[str] = None

    def args(self) -> List[str]:
        """Extra new-session arguments for these options."""
        args: List[str] = []
        if self.window_name:
            args.extend(["-n", self.window_name])
        return args
