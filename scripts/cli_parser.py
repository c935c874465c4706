import argparse

from scripts.scene_builder import SCENES


def create_argument_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Watch-face physics - headless scene runner",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=_get_usage_examples()
    )

    _add_scene_arguments(parser)
    _add_simulation_arguments(parser)
    _add_output_arguments(parser)

    return parser


def _get_usage_examples() -> str:
    return """
Usage Examples:
    # Run the chain scene with defaults (300 steps, 200x200 viewport)
    python3 run.py --scene chain

    # Liquid scene tilted to the left, saving the trajectory
    python3 run.py --scene liquid --gravity-x -1 --gravity-y 0.5 --output liquid.npy

    # Rigid bodies with a fixed seed and per-step profiling
    python3 run.py --scene bodies --count 8 --seed 7 --profile --no-trajectory
"""


def _add_scene_arguments(parser: argparse.ArgumentParser) -> None:
    scene_group = parser.add_argument_group('Scene Options')

    scene_group.add_argument(
        "--scene",
        choices=sorted(SCENES),
        default="chain",
        help="Scene to simulate (default: chain)"
    )

    scene_group.add_argument(
        "--width",
        type=float,
        default=200.0,
        help="Viewport width (default: 200)"
    )

    scene_group.add_argument(
        "--height",
        type=float,
        default=200.0,
        help="Viewport height (default: 200)"
    )

    scene_group.add_argument(
        "--count",
        type=int,
        help="Chain segments, particles per row, or number of bodies (clamped per scene)"
    )

    scene_group.add_argument(
        "--rows",
        type=int,
        help="Particle rows for the liquid scene (clamped)"
    )

    scene_group.add_argument(
        "--size",
        type=float,
        help="Segment length, particle radius, or body radius"
    )

    scene_group.add_argument(
        "--seed",
        type=int,
        help="Seed for the random initial spin of rigid bodies"
    )


def _add_simulation_arguments(parser: argparse.ArgumentParser) -> None:
    simulation_group = parser.add_argument_group('Simulation Options')

    simulation_group.add_argument(
        "--steps",
        type=int,
        default=300,
        help="Number of simulation steps (default: 300)"
    )

    simulation_group.add_argument(
        "--gravity-x",
        type=float,
        help="Raw gravity direction x, before engine scaling"
    )

    simulation_group.add_argument(
        "--gravity-y",
        type=float,
        help="Raw gravity direction y, before engine scaling"
    )

    simulation_group.add_argument(
        "--profile",
        action="store_true",
        help="Record per-step timing statistics"
    )


def _add_output_arguments(parser: argparse.ArgumentParser) -> None:
    output_group = parser.add_argument_group('Output Options')

    output_group.add_argument(
        "--output",
        type=str,
        help="Path to save the trajectory (default: artifacts/<scene>_TIMESTAMP.npy)"
    )

    output_group.add_argument(
        "--metrics-output",
        type=str,
        help="Optional path to save run metrics as JSON"
    )

    output_group.add_argument(
        "--log-file",
        type=str,
        help="Also write the log to this file"
    )

    output_group.add_argument(
        "--no-trajectory",
        action="store_true",
        help="Only keep the final state instead of every frame"
    )

    output_group.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Verbose output"
    )
