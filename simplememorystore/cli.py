import argparse
import sys
from pathlib import Path
from typing import Any

from common.config.settings import StoreSettings, load_settings
from common.utils.logger import configure_logging

from .core import Store
from .exceptions import InvalidRequestError, SimpleMemoryStoreError
from .factory import create_store
from .serialization import deserialize, serialize


def load_operations(path: str) -> list[dict[str, Any]]:
    """
    Load a JSON list of operations from ``path`` (``-`` reads stdin).

    Raises
    ------
    ValueError
        If the file is not valid JSON or does not hold a list of objects.
    """
    raw = sys.stdin.read() if path == "-" else Path(path).read_bytes()
    ops = deserialize(raw)
    if not isinstance(ops, list) or not all(isinstance(op, dict) for op in ops):
        raise ValueError(f"{path} must contain a JSON list of operation objects")
    return ops


def run_operation(store: Store, op: dict[str, Any]) -> Any:
    """Apply one operation object to ``store`` and return its JSON result."""
    name = op.get("op")
    if name == "insert":
        return store.insert(op.get("type"), op.get("element"))
    if name == "select":
        return store.select(op.get("type"), op.get("id"))
    if name == "replace":
        return store.replace(op.get("type"), op.get("id"), op.get("element"))
    if name == "remove":
        return store.remove(op.get("type"), op.get("id"))
    if name == "reset":
        return {"reset": store.reset(op.get("confirm", False)) is not None}
    if name == "init":
        return store.init_with_default_data().snapshot()
    raise InvalidRequestError(detail=f"unknown op {name!r}")


def _emit(payload: Any) -> None:
    print(serialize(payload).decode("utf-8"))


def _cmd_seed(settings: StoreSettings) -> int:
    store = create_store(settings.model_copy(update={"seed_default_data": False}))
    _emit(store.init_with_default_data().snapshot())
    return 0


def _cmd_apply(settings: StoreSettings, path: str, seed: bool) -> int:
    try:
        ops = load_operations(path)
    except (OSError, ValueError) as exc:
        print(str(exc), file=sys.stderr)
        return 2

    if seed:
        settings = settings.model_copy(update={"seed_default_data": True})
    store = create_store(settings)
    failed = False
    for op in ops:
        try:
            result = run_operation(store, op)
        except SimpleMemoryStoreError as exc:
            failed = True
            _emit({"op": op.get("op"), "error": exc.code.value, "message": str(exc)})
        else:
            _emit({"op": op.get("op"), "result": result})
    return 1 if failed else 0


def main(argv: list[str] | None = None) -> int:
    """Entry point for the SimpleMemoryStore CLI."""
    parser = argparse.ArgumentParser(prog="sms", description="SimpleMemoryStore CLI")
    parser.add_argument(
        "--config", dest="config", default=None, help="Path to a JSON or YAML settings file"
    )
    parser.add_argument("--log-level", dest="log_level", default=None, help="Override log level")

    sub = parser.add_subparsers(dest="cmd", required=True)

    sub.add_parser("seed", help="Print the default tweets and users as JSON")

    p_apply = sub.add_parser("apply", help="Replay a JSON list of operations on a fresh store")
    p_apply.add_argument("--path", required=True, help="Operations file, or - for stdin")
    p_apply.add_argument(
        "--seed", action="store_true", help="Start from the default tweets and users"
    )

    args = parser.parse_args(argv)

    overrides = {"log_level": args.log_level} if args.log_level else None
    settings = load_settings(config_file=args.config, overrides=overrides)
    configure_logging(settings.service_name, level=settings.log_level)

    if args.cmd == "seed":
        return _cmd_seed(settings)
    return _cmd_apply(settings, args.path, args.seed)


if __name__ == "__main__":
    raise SystemExit(main())
