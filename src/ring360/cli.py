from __future__ import annotations
import argparse, json, logging, sys
from .convert import AngleDomainError, require_finite, to_360, to_360_gis
from .models.ring import Ring360

log = logging.getLogger(__name__)


def _load_values(raw_values, gis: bool) -> list[Ring360]:
    convert = to_360_gis if gis else to_360
    out = []
    for v in raw_values:
        out.append(convert(require_finite(v)))
    log.debug("parsed %d value(s) (gis=%s): %s", len(out), gis, out)
    return out


def _dump(v: Ring360) -> dict:
    data = v.model_dump(mode="json")
    data["gis"] = v.to_gis()
    return data


def cmd_info(args):
    (v,) = _load_values([args.value], args.gis)
    print(json.dumps(_dump(v), indent=2))
    return 0


def cmd_angle(args):
    a, b = _load_values([args.a, args.b], args.gis)
    result = a.angle_abs(b) if args.abs else a.angle(b)
    print(json.dumps({"from": a.degrees, "to": b.degrees, "abs": args.abs, "angle": result}, indent=2))
    return 0


def cmd_sum(args):
    values = _load_values(args.values, args.gis)
    total = values[0]
    for v in values[1:]:
        total = total + v
    print(json.dumps(_dump(total), indent=2))
    return 0


def cmd_plot(args):
    from .viz import plot_positions
    plot_positions(_load_values(args.values, args.gis))
    return 0


def build_parser():
    p = argparse.ArgumentParser(prog="ring360", description="360-degree ring arithmetic utilities")
    p.add_argument("-v", "--verbose", action="store_true", help="debug logging on stderr")
    sub = p.add_subparsers(dest="cmd", required=True)

    sp = sub.add_parser("info", help="print degrees, rotations, progress and gis of a value as JSON")
    sp.add_argument("value", type=float)
    sp.add_argument("--gis", action="store_true", help="read the value as a ±180° longitude")
    sp.set_defaults(func=cmd_info)

    sp = sub.add_parser("angle", help="shortest signed angle from A to B")
    sp.add_argument("a", type=float)
    sp.add_argument("b", type=float)
    sp.add_argument("--abs", action="store_true", help="clockwise-only reading in [0, 360)")
    sp.add_argument("--gis", action="store_true")
    sp.set_defaults(func=cmd_angle)

    sp = sub.add_parser("sum", help="add values, keeping the rotation count")
    sp.add_argument("values", type=float, nargs="+")
    sp.add_argument("--gis", action="store_true")
    sp.set_defaults(func=cmd_sum)

    sp = sub.add_parser("plot", help="minimal polar plot of positions")
    sp.add_argument("values", type=float, nargs="+")
    sp.add_argument("--gis", action="store_true")
    sp.set_defaults(func=cmd_plot)

    return p


def main(argv=None):
    p = build_parser()
    ns = p.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if ns.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    try:
        return ns.func(ns)
    except AngleDomainError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    raise SystemExit(main())
