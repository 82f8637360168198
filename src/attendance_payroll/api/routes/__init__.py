"""API routes."""

from attendance_payroll.api.routes.employees import router as employees_router
from attendance_payroll.api.routes.health import router as health_router
from attendance_payroll.api.routes.payroll import router as payroll_router
from attendance_payroll.api.routes.roles import router as roles_router

__all__ = ["employees_router", "health_router", "payroll_router", "roles_router"]
