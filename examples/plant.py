import argparse
import time

import rerun as rr

from lturtle import GrammarInterpreter, get_preset, load_from_toml, preset_names
from lturtle.visualize import log_agent, log_primitives, log_symbols


def main():
    parser = argparse.ArgumentParser(description="Grow an L-system plant and show it in rerun")
    parser.add_argument(
        "plant",
        nargs="?",
        default="bush",
        help=f"preset name ({', '.join(preset_names())}) or path to a .toml file",
    )
    parser.add_argument(
        "--strict", action="store_true", help="fail on unbalanced brackets"
    )
    args = parser.parse_args()

    if args.plant.endswith(".toml"):
        plant = load_from_toml(args.plant)
    else:
        plant = get_preset(args.plant)

    rr.init("lturtle", spawn=True)

    # Grow the plant one depth level per frame
    for depth in range(plant.config.max_depth + 1):
        rr.set_time("depth", sequence=depth)
        config = plant.config.model_copy(update={"max_depth": depth})

        branches, leaves = [], []
        interpreter = GrammarInterpreter(
            config, plant.rules, branches, leaves, strict=args.strict
        )
        start = time.time()
        interpreter.run(plant.axiom)
        print(
            f"{plant.name} depth {depth}: {len(branches)} branches, "
            f"{len(leaves)} leaves in {time.time() - start:.3f}s"
        )

        log_primitives(branches, leaves)
        log_agent(interpreter.agent)
        log_symbols(interpreter.expand(plant.axiom))


if __name__ == "__main__":
    main()
