from servicerota.db.database import Base

# Import models
from servicerota.db.models.users import Users
from servicerota.db.models.restaurants import Restaurants
from servicerota.db.models.employees import Employees
from servicerota.db.models.employee_roles import EmployeeRoles
from servicerota.db.models.restaurant_zones import RestaurantZones
from servicerota.db.models.zone_roles_needed import ZoneRolesNeeded
from servicerota.db.models.schedules import Schedules, ScheduleStatus, CoverageStatus

__all__ = [
    "Base",
    # Models
    "Users",
    "Restaurants",
    "Employees",
    "EmployeeRoles",
    "RestaurantZones",
    "ZoneRolesNeeded",
    "Schedules",
    # Enums
    "ScheduleStatus",
    "CoverageStatus",
]
