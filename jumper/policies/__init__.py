"""jumper/policies — Policy interface, action space, and programmed policies (Layer 3)."""

from jumper.policies.actions import (
    ACTION_JUMP,
    ACTION_NAMES,
    ACTION_NOOP,
    NUM_ACTIONS,
)
from jumper.policies.base import Policy
from jumper.policies.idle import IdlePolicy
from jumper.policies.manual import ManualPolicy
from jumper.policies.registry import POLICY_REGISTRY, resolve_policy
from jumper.policies.scripted import ScriptedPolicy
from jumper.policies.spam_jump import SpamJumpPolicy
from jumper.policies.timed_jump import TimedJumpPolicy

__all__ = [
    "Policy",
    "ACTION_NOOP",
    "ACTION_JUMP",
    "ACTION_NAMES",
    "NUM_ACTIONS",
    "IdlePolicy",
    "SpamJumpPolicy",
    "TimedJumpPolicy",
    "ScriptedPolicy",
    "ManualPolicy",
    "POLICY_REGISTRY",
    "resolve_policy",
]

try:
    from jumper.policies.ppo_policy import PPOPolicy

    __all__.append("PPOPolicy")
except ImportError:
    pass
