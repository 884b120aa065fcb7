"""Command-line entry point for clang-format-hook"""
