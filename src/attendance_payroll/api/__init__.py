"""HTTP API for department payroll."""
