"""Unified command-line interface for billzy.

Usage:
    billzy parse <text_file>...
    billzy scan <image>...
    billzy split <split.toml>
"""
