"""Abimanyu Core package.

Back-office business rules for construction contractors, organized by feature
modules (workers, payroll, overtime, kasbon, quota, reports, ...) with a thin
Flask controller layer on top of service/repository layers.
"""
