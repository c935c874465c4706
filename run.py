#!/usr/bin/env python3
"""Headless runner for the watch-face physics scenes.

Pipeline: create_engine → apply gravity → run steps → collect trajectory → save
"""
import sys
from pathlib import Path

from scripts.cli_parser import create_argument_parser
from scripts.config import OutputConfig, SimulationConfig
from scripts.error_handler import ErrorHandler, FileOperationError, validate_output_path
from scripts.file_operations import generate_timestamped_filename, save_metrics, save_numpy_array
from scripts.output_handler import SimulationOutputHandler
from scripts.run_simulation import SimulationRunner
from scripts.scene_builder import config_from_args, create_engine

from dialphys.errors import SimulationError


def main(argv=None) -> int:
    parser = create_argument_parser()
    args = parser.parse_args(argv)

    sim_config = SimulationConfig.from_args(args)
    output_config = OutputConfig.from_args(args)
    errors = ErrorHandler(log_file=output_config.log_file, verbose=output_config.verbose)
    output = SimulationOutputHandler(verbose=True)

    try:
        output_path = output_config.trajectory_output or (
            Path("artifacts") / generate_timestamped_filename(sim_config.scene, "npy")
        )
        validate_output_path(output_path, "npy")
        if output_config.metrics_output:
            validate_output_path(output_config.metrics_output, "json")

        engine = create_engine(sim_config.scene, sim_config.width, sim_config.height,
                               config_from_args(sim_config.scene, args))
        if sim_config.gravity is not None:
            engine.set_gravity(*sim_config.gravity)

        output.print_simulation_start(sim_config.scene, sim_config.steps,
                                      sim_config.collect_trajectory)
        runner = SimulationRunner(
            engine,
            scene=sim_config.scene,
            steps=sim_config.steps,
            enable_profiling=sim_config.enable_profiling,
            collect_trajectory=sim_config.collect_trajectory
        )
        trajectory, metrics = runner.run()
        output.print_simulation_complete(metrics)
        output.print_profiling_data(metrics.get('profile_data'))

        with errors.error_context("save trajectory", FileOperationError):
            save_numpy_array(trajectory, output_path)
        output.print_trajectory_saved(output_path)

        if output_config.metrics_output:
            with errors.error_context("save metrics", FileOperationError):
                save_metrics(metrics, output_config.metrics_output)
    except SimulationError as e:
        output.print_error(str(e))
        return errors.handle_error(e)

    return 0


if __name__ == "__main__":
    sys.exit(main())
