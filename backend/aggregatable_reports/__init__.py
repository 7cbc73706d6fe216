"""Aggregatable Reports: conversion of browser attribution reports into aggregation-worker records.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
