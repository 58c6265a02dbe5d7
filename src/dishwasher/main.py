"""
Dishwasher Cycle Runner
=======================

Command-line entry point that runs one wash cycle on the simulated
appliance and reports the outcome.
"""

import argparse
import logging
import sys
from typing import List, Optional

from .configuration import ProgramConfiguration
from .programs import FillLevel, WashingProgram
from .simulation import ApplianceSimConfig, SimulatedAppliance

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Run a dishwasher cycle on simulated hardware")
    parser.add_argument("--program", "-p", default=WashingProgram.ECO.label,
                        choices=[p.label for p in WashingProgram],
                        help="Washing program")
    parser.add_argument("--fill-level", "-f", default=FillLevel.FULL.value,
                        choices=[f.value for f in FillLevel],
                        help="Water fill level")
    parser.add_argument("--tablets", dest="tablets", action="store_true", default=True,
                        help="Detergent tablets loaded (default)")
    parser.add_argument("--no-tablets", dest="tablets", action="store_false",
                        help="No detergent tablets")

    hw = parser.add_argument_group("simulated hardware")
    hw.add_argument("--door-open", action="store_true",
                    help="Leave the door open")
    hw.add_argument("--filter-capacity", type=float, default=100.0,
                    help="Nominal dirt filter capacity reading")
    hw.add_argument("--filter-noise", type=float, default=0.0,
                    help="Std dev of filter sensor noise")
    hw.add_argument("--pump-fault", choices=["pour", "drain"], default=None,
                    help="Inject a pump fault on this operation")
    hw.add_argument("--engine-fault", action="store_true",
                    help="Inject an engine fault")
    hw.add_argument("--seed", type=int, default=None,
                    help="Random seed for sensor noise")

    parser.add_argument("--verbose", "-v", action="store_true",
                        help="Verbose logging")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)

    # Setup logging
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    config = (ProgramConfiguration.builder()
              .with_program(WashingProgram.from_label(args.program))
              .with_fill_level(FillLevel(args.fill_level))
              .with_tablets_used(args.tablets)
              .build())

    appliance = SimulatedAppliance(ApplianceSimConfig(
        door_closed=not args.door_open,
        filter_capacity=args.filter_capacity,
        filter_noise_std=args.filter_noise,
        pump_fault_on=args.pump_fault,
        engine_fault=args.engine_fault,
        seed=args.seed,
    ))

    result = appliance.build_controller().start(config)
    logger.info(f"Cycle result: {result.status.name}, {result.run_minutes} min")

    print(f"Status:  {result.status.name}")
    print(f"Minutes: {result.run_minutes}")
    print("Hardware calls:")
    for entry in appliance.journal.entries:
        print(f"  {entry}")

    return 0 if result.is_success else 1


if __name__ == "__main__":
    sys.exit(main())
