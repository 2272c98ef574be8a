#!/usr/bin/env python3
"""PC Build Checker — main entry point."""
import logging
import sys

from build_file import BuildFileError, load_build
from compatibility import evaluate_compatibility
from config import Config
from output.html import render_html_report, update_index
from output.terminal import render_build_report
from power import estimate_monthly_cost, evaluate_power, recommend_psus
from sample_parts import sample_build

logger = logging.getLogger(__name__)


def _flag_value(args: list[str], flag: str) -> str | None:
    """Return the value following ``flag`` in args, or None."""
    if flag in args:
        i = args.index(flag)
        if i + 1 < len(args) and not args[i + 1].startswith("--"):
            return args[i + 1]
    return None


def _positional(args: list[str]) -> list[str]:
    valued = {"--hours", "--rate", "--html"}
    out = []
    skip = False
    for arg in args:
        if skip:
            skip = False
            continue
        if arg in valued:
            skip = True
            continue
        if not arg.startswith("--"):
            out.append(arg)
    return out


def main(argv: list[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else argv

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(name)s] %(levelname)s: %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )
    if "--debug" in args:
        logging.getLogger().setLevel(logging.DEBUG)

    config = Config()
    try:
        if _flag_value(args, "--hours") is not None:
            config.usage_hours_per_day = float(_flag_value(args, "--hours"))
        if _flag_value(args, "--rate") is not None:
            config.electricity_rate = float(_flag_value(args, "--rate"))
    except ValueError as e:
        logger.error(f"Invalid number: {e}")
        return 1
    html_dir = None
    if "--html" in args:
        html_dir = _flag_value(args, "--html") or config.results_dir

    paths = _positional(args)
    if paths:
        try:
            selection = load_build(paths[0])
        except BuildFileError as e:
            logger.error(str(e))
            return 1
    else:
        logger.info("No build file given, using the sample build")
        selection = sample_build()

    compatibility = evaluate_compatibility(selection, config)
    power = evaluate_power(selection, config)
    cost = estimate_monthly_cost(power, config.usage_hours_per_day, config.electricity_rate)

    print(render_build_report(selection, compatibility, power, cost))

    if power.psu_capacity < power.recommended_psu:
        suggestions = recommend_psus(power.recommended_psu)
        if suggestions:
            print("Suggested PSUs:")
            for psu in suggestions:
                print(f"  {psu.name} ({psu.capacity}W, {psu.efficiency}): {psu.price:,}")

    if html_dir:
        path = render_html_report(selection, compatibility, power, output_dir=html_dir, cost=cost)
        update_index(html_dir)
        logger.info(f"HTML report saved to: {path}")

    return 0 if compatibility.is_compatible else 2


if __name__ == "__main__":
    sys.exit(main())
