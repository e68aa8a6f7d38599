"""Shift payroll package.

Pure computations for worked shift hours, the regular/overtime split and wage
rates, organized by feature modules (shifts, payroll) with a thin Flask
controller layer on top.
"""
