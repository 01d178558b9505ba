"""jumper — headless jump-timing RL scenario: obstacle field, jumping agent, Gym env."""
