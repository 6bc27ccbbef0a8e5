#!/usr/bin/env python3
import sys
from ring360.convert import to_360, to_360_gis

SAMPLES = [-720.0, -400.0, -180.0, -60.0, -0.5, 0.0, 90.0, 180.0, 359.9, 360.0, 492.2, 1080.5]

def main(gis: bool = False):
    convert = to_360_gis if gis else to_360
    print(f"{'input':>10} {'raw':>10} {'degrees':>10} {'rot':>4} {'gis':>10}")
    for x in SAMPLES:
        v = convert(x)
        print(f"{x:>10.3f} {v.raw:>10.3f} {v.degrees:>10.3f} {v.rotations:>4d} {v.to_gis():>10.3f}")

if __name__ == "__main__":
    main(gis="--gis" in sys.argv[1:])
