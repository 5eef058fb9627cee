import logging
from typing import Optional
from .config import Config, load_config
from .errors import PolicyConfigError
from .ports.batch_policy import BatchPolicy
from .services.policies.size_policy import SizePolicy
from .services.policies.target_set_policy import TargetSetPolicy
from .services.batching.policy_batcher import PolicyBatcher

def _choose_policy(cfg: Config) -> BatchPolicy:
    mode = cfg.batch_policy
    if mode == "target_set":
        if not cfg.batch_target_ids:
            # an empty target set could only match an empty batch, which is never evaluated
            raise PolicyConfigError("BATCH_TARGET_IDS is required when BATCH_POLICY=target_set")
        return TargetSetPolicy(cfg.batch_target_ids)
    if mode == "size":
        return SizePolicy(cfg.batch_size)
    raise PolicyConfigError(f"unknown batch policy: {mode!r}")

def build_batcher(cfg: Optional[Config] = None) -> PolicyBatcher:
    """Fresh PolicyBatcher for the configured policy (environment config when cfg is None)."""
    if cfg is None:
        cfg = load_config()
    policy = _choose_policy(cfg)
    logging.info("batcher policy=%s", policy)
    return PolicyBatcher(policy)
