"""jumper/policies/registry.py — Policy name → class mapping.

Used by scenario YAML resolution to instantiate policies by string name.
"""

from __future__ import annotations

from jumper.policies.idle import IdlePolicy
from jumper.policies.manual import ManualPolicy
from jumper.policies.scripted import ScriptedPolicy
from jumper.policies.spam_jump import SpamJumpPolicy
from jumper.policies.timed_jump import TimedJumpPolicy

POLICY_REGISTRY: dict[str, type] = {
    "idle": IdlePolicy,
    "spam_jump": SpamJumpPolicy,
    "timed_jump": TimedJumpPolicy,
    "scripted": ScriptedPolicy,
    "manual": ManualPolicy,
}

try:
    from jumper.policies.ppo_policy import PPOPolicy

    POLICY_REGISTRY["ppo"] = PPOPolicy
except ImportError:
    pass


def resolve_policy(name: str, params: dict | None = None):
    """Look up a policy class by name and instantiate with optional kwargs.

    Args:
        name: Policy name (key in POLICY_REGISTRY).
        params: Optional kwargs passed to the policy constructor.

    Returns:
        An instantiated policy conforming to the Policy protocol.

    Raises:
        KeyError: If name is not in the registry.
    """
    if name not in POLICY_REGISTRY:
        if name == "ppo":
            raise KeyError(
                "Policy 'ppo' is not available. Install PyTorch to use PPOPolicy: "
                "pip install 'jumper[ppo]'"
            )
        raise KeyError(f"Unknown policy: {name!r}. Available: {sorted(POLICY_REGISTRY)}")
    cls = POLICY_REGISTRY[name]
    return cls(**(params or {}))
