"""
Example: series RLC circuit, steady state and resonance curve.

Prints the phasor solution for the slider values, retunes the drive to the
resonance point, and optionally saves the frequency-response plot.
"""

import argparse
from pathlib import Path

import numpy as np

from physlab.circuits import (
    frequency_response,
    quality_factor,
    resonance_angular_frequency,
    resonance_frequency,
    solve,
    tune_to_resonance,
)
from physlab.formatting import describe_character, rms
from physlab.logging_config import setup_logging
from physlab.units import circuit_parameters_from_controls


def main() -> None:
    parser = argparse.ArgumentParser(description="Series RLC phasor analysis")
    parser.add_argument("--voltage", type=float, default=9.0, help="amplitude (V)")
    parser.add_argument("--omega", type=float, default=50, help="angular frequency (rad/s)")
    parser.add_argument("--resistance", type=float, default=100, help="slider units (x 0.1 ohm)")
    parser.add_argument("--capacitance", type=float, default=100, help="uF")
    parser.add_argument("--inductance", type=float, default=100, help="mH")
    parser.add_argument("--plot", type=Path, default=None, help="save resonance curve to this file")
    args = parser.parse_args()

    logger = setup_logging("physlab", level="INFO")

    params = circuit_parameters_from_controls(
        args.voltage, args.omega, args.resistance, args.capacitance, args.inductance
    )
    values = solve(params)
    logger.info("XL = %.1f ohm, XC = %.1f ohm, Z = %.1f ohm", values.XL, values.XC, values.Z)
    logger.info("I = %.4f A (rms %.4f A)", values.current, rms(values.current))
    logger.info(describe_character(values))

    w0 = resonance_angular_frequency(params.inductance, params.capacitance)
    f0 = resonance_frequency(params.inductance, params.capacitance)
    logger.info("resonance: w0 = %.1f rad/s (f0 = %.2f Hz), Q = %.2f",
                w0, f0, quality_factor(params.resistance, params.inductance, params.capacitance))
    at_resonance = solve(tune_to_resonance(params))
    logger.info("at resonance: %s, I = %.4f A", describe_character(at_resonance), at_resonance.current)

    if args.plot is not None:
        from physlab.simulation import plot_frequency_response

        import matplotlib.pyplot as plt

        omegas = np.linspace(0.1 * w0, 3.0 * w0, 400)
        plot_frequency_response(frequency_response(params, omegas))
        plt.savefig(args.plot, dpi=120)
        plt.close()
        logger.info("saved %s", args.plot)


if __name__ == "__main__":
    main()
