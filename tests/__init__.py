"""Test package for the reaction speed trainer.

Core modules (key sequencing, trial controller, persistence, charting) are
tested directly; the pygame shell runs headlessly using SDL's dummy video
driver. To run these tests, execute ``pytest`` from the project root.
"""
