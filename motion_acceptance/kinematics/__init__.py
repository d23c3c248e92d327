# motion_acceptance/kinematics/__init__.py
"""
Kinematics module for the motion acceptance library.

Provides the expected-value functions and the constant-velocity motion model
that predicts what a device should report during a commanded move.
"""
from .expected import ConstantAt, ExpectedFunction, LinearRamp, ZeroFunction
from .motion_model import MotionModel, generate

__all__ = [
    "ExpectedFunction",
    "ZeroFunction",
    "LinearRamp",
    "ConstantAt",
    "MotionModel",
    "generate",
]
