"""Diagram model, YAML configuration parsing, graph ranking and the diagram generation workflow."""

__version__ = "0.1.0"