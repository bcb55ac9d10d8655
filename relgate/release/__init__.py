"""Release validation.

- model: event, outputs and failure types
- semver: semantic version grammar
- validator: the ordered guard chain
"""

from __future__ import annotations
