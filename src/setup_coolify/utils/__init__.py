"""Shared helpers for downloads and subprocesses."""
