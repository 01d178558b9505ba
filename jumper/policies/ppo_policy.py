"""jumper/policies/ppo_policy.py — PPO policy (Layer 3).

Wraps a trained CleanRL-style PPO checkpoint as a Policy. Requires torch.
The actor-critic layout (two 64-unit tanh layers per head) must match the
network that produced the state_dict.
"""

from __future__ import annotations

import numpy as np
import torch
import torch.nn as nn

from jumper.observation import OBS_DIM
from jumper.policies.actions import NUM_ACTIONS


def _layer_init(layer: nn.Linear, std: float = np.sqrt(2), bias_const: float = 0.0) -> nn.Linear:
    """Orthogonal weight init matching CleanRL's ppo.py."""
    nn.init.orthogonal_(layer.weight, std)
    nn.init.constant_(layer.bias, bias_const)
    return layer


class PPONetwork(nn.Module):
    """Actor-critic MLP."""

    def __init__(self, obs_dim: int = OBS_DIM, num_actions: int = NUM_ACTIONS) -> None:
        super().__init__()
        self.critic = nn.Sequential(
            _layer_init(nn.Linear(obs_dim, 64)),
            nn.Tanh(),
            _layer_init(nn.Linear(64, 64)),
            nn.Tanh(),
            _layer_init(nn.Linear(64, 1), std=1.0),
        )
        self.actor = nn.Sequential(
            _layer_init(nn.Linear(obs_dim, 64)),
            nn.Tanh(),
            _layer_init(nn.Linear(64, 64)),
            nn.Tanh(),
            _layer_init(nn.Linear(64, num_actions), std=0.01),
        )


class PPOPolicy:
    """Greedy evaluation of a trained PPO actor.

    Loads a state_dict checkpoint from *model_path*, or accepts an
    already-built *model* (used by tests and in-process evaluation).
    """

    def __init__(
        self,
        model_path: str | None = None,
        device: str = "cpu",
        obs_dim: int = OBS_DIM,
        num_actions: int = NUM_ACTIONS,
        model: PPONetwork | None = None,
    ) -> None:
        if model_path is None and model is None:
            raise ValueError("PPOPolicy needs either model_path or model")
        self.device = torch.device(device)
        if model is None:
            model = PPONetwork(obs_dim, num_actions)
            model.load_state_dict(
                torch.load(model_path, map_location=self.device, weights_only=True)
            )
        self.model = model
        self.model.to(self.device)
        self.model.eval()

    def act(self, obs: np.ndarray) -> int:
        """Return the greedy action for the given observation."""
        with torch.no_grad():
            obs_tensor = torch.as_tensor(obs, dtype=torch.float32).unsqueeze(0).to(self.device)
            logits = self.model.actor(obs_tensor)
            return int(logits.argmax(dim=-1).item())

    def reset(self) -> None:
        """No internal state to reset."""
