import argparse
from dataclasses import replace

from dispatchdemo.core import log
from dispatchdemo.demo import DemoConfig, run


def main():
    ap = argparse.ArgumentParser(description="single vs double dispatch demo")
    ap.add_argument("--metrics", action="store_true", help="log dispatch counters at the end")
    args = ap.parse_args()

    cfg = DemoConfig.from_env()
    if args.metrics:
        cfg = replace(cfg, metrics=True)

    log.setup(cfg.log_level, cfg.log_json)
    run(cfg)


if __name__ == "__main__":
    main()
