# scripts/batch_demo.py
import argparse, json, logging

from unit_batcher.app import build_batcher
from unit_batcher.config import load_config
from unit_batcher.domain.models import KeyedUnit

def batch_to_list(batch):
    return [u.id() for u in batch]

def main():
    p = argparse.ArgumentParser(description="Feed ids through a batcher configured from BATCH_* env vars")
    p.add_argument("ids", nargs="+", help="Unit ids to insert, in order")
    p.add_argument("--flush", action="store_true", help="Force-release the trailing partial batch at the end")
    args = p.parse_args()

    cfg = load_config()
    logging.basicConfig(level=cfg.log_level, format="%(levelname)s %(message)s")
    batcher = build_batcher(cfg)

    released = []
    for i, key in enumerate(args.ids):
        batch = batcher.insert(KeyedUnit(key, payload=i))
        if batch is not None:
            released.append(batch_to_list(batch))

    left_over = len(batcher)
    pending = batcher.force_release() if args.flush else []

    print(json.dumps({
        "policy": cfg.batch_policy,
        "batches": released,
        "flushed": batch_to_list(pending),
        "left_over": left_over,
    }, ensure_ascii=False, indent=2))

if __name__ == "__main__":
    main()
