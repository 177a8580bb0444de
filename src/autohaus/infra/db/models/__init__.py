from autohaus.infra.db.models.base import Base
from autohaus.infra.db.models.financing_application import FinancingApplicationRow
from autohaus.infra.db.models.staff_user import StaffUserRow
from autohaus.infra.db.models.vehicle import VehicleRow

__all__ = ["Base", "FinancingApplicationRow", "StaffUserRow", "VehicleRow"]
