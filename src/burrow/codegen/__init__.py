"""Code generation for the route module."""

from burrow.codegen.generator import GeneratedModule, ImportTable, generate_module
from burrow.codegen.nodes import Module, render_module

__all__ = [
    "GeneratedModule",
    "ImportTable",
    "Module",
    "generate_module",
    "render_module",
]
