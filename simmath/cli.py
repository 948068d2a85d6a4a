#!/usr/bin/env python3
# -*- coding: utf-8 -*-

import argparse
import importlib.util
import logging

from IPython import embed

import simmath
from simmath.src.MathLogging import setupLogging


"""
- setup_environment
- run_script
- start_interactive
- main

"""


def setup_environment():
    """Set up SimMath environment."""
    logger = logging.getLogger("SimMath")
    logger.info(f"Initializing SimMath environment, version {simmath.__version__}")

    env = {
        "logger": logger,
        "version": simmath.__version__,
        "Box": simmath.Box,
        "Vector3r": simmath.Vector3r,
    }

    return env


def run_script(script_path, env):
    """Run the specified Python script."""
    logger = env["logger"]
    logger.info(f"Executing script: {script_path}")

    try:
        spec = importlib.util.spec_from_file_location("simmath_script", script_path)
        module = importlib.util.module_from_spec(spec)

        # Inject SimMath environment into module
        module.SIMMATH_ENV = env

        spec.loader.exec_module(module)
        logger.info(f"Script execution completed: {script_path}")
    except Exception as e:
        logger.error(f"Script execution failed: {e}")
        raise

    return module


def start_interactive(env):
    """Start interactive IPython environment."""
    logger = env["logger"]
    logger.info("Starting interactive SimMath environment")

    banner = f"""
    =====================================================
    SimMath {env["version"]} Interactive Environment
    -----------------------------------------------------
    Box and Vector3r are preloaded.

    Environment variables:
    - SIMMATH_ENV: Contains SimMath environment configuration
    =====================================================
    """

    namespace = {
        "SIMMATH_ENV": env,
        "Box": simmath.Box,
        "Vector3r": simmath.Vector3r,
        "vectorMin": simmath.vectorMin,
        "vectorMax": simmath.vectorMax,
        "vectorEqual": simmath.vectorEqual,
    }

    embed(banner1=banner, user_ns=namespace)


def main(argv=None):
    """Main function, handle command line arguments."""
    parser = argparse.ArgumentParser(
        description="SimMath - geometric primitives for simulation"
    )
    parser.add_argument("script", nargs="?", help="Python script to execute")
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        default="INFO",
        help="Set log level",
    )

    args = parser.parse_args(argv)

    setupLogging(args.log_level)
    env = setup_environment()

    # Execute script or start interactive environment
    if args.script:
        run_script(args.script, env)
    else:
        start_interactive(env)
