class BatcherConsumedError(RuntimeError):
    """The batcher was already drained by force_release() and cannot be used again."""
    pass

class PolicyConfigError(ValueError):
    """Configured batch policy is unknown or incomplete."""
    pass
