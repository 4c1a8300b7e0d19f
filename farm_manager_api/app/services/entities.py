"""
Entity declarations.

Each entity is configuration data: a table name in the hosted record
store plus the UI-to-storage field mapping.  The crop status and
transaction category vocabularies shared with the schemas and the
dashboard live here as well.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Dict

from farm_manager_api.app.services.entity_service import EntityConfig
from farm_manager_api.app.services.field_mapper import Field, split_list

CROP_STATUSES = ("planted", "growing", "flowering", "ready", "harvested")
EXPENSE_CATEGORIES = (
    "seeds",
    "fertilizer",
    "pesticides",
    "equipment",
    "fuel",
    "labor",
    "maintenance",
    "utilities",
    "other",
)
INCOME_CATEGORIES = ("crop_sales", "livestock", "subsidies", "insurance", "services", "other")
TRANSACTION_CATEGORIES = {"expense": EXPENSE_CATEGORIES, "income": INCOME_CATEGORIES}


def utcnow_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


# ----------------------------------------------------------------------
# Write hooks
# ----------------------------------------------------------------------
def _farmer_active_crops(ui: Dict[str, Any], storage: Dict[str, Any], creating: bool) -> None:
    # activeCrops tracks the number of primary crops on every write.
    if "primaryCrops" in ui or creating:
        storage["active_crops_c"] = len(split_list(ui.get("primaryCrops")))


def _farm_touch(ui: Dict[str, Any], storage: Dict[str, Any], creating: bool) -> None:
    storage["updated_at_c"] = utcnow_iso()


def _task_completed_at(ui: Dict[str, Any], storage: Dict[str, Any], creating: bool) -> None:
    # completedAt is set iff the task is completed.
    if "completed_c" not in storage:
        return
    if not storage["completed_c"]:
        storage["completed_at_c"] = None
    elif not storage.get("completed_at_c"):
        storage["completed_at_c"] = utcnow_iso()


# ----------------------------------------------------------------------
# Configurations
# ----------------------------------------------------------------------
FARMER = EntityConfig(
    name="farmer",
    table="farmer_c",
    fields=(
        Field("name", "name_c", mirror="Name"),
        Field("email", "email_c"),
        Field("phone", "phone_c"),
        Field("dateOfBirth", "date_of_birth_c"),
        Field("gender", "gender_c"),
        Field("address", "address_c"),
        Field("farmName", "farm_name_c"),
        Field("farmLocation", "farm_location_c"),
        Field("farmSize", "farm_size_c", "float"),
        Field("experience", "experience_c", "int"),
        Field("primaryCrops", "primary_crops_c", "list", default=list),
        Field("status", "status_c", default="active"),
        Field("memberSince", "member_since_c", default=utcnow_iso),
        Field("stats.totalFarms", "total_farms_c", "int", default=1),
        Field("stats.activeCrops", "active_crops_c", "int", default=0),
        Field("stats.pendingTasks", "pending_tasks_c", "int", default=0),
    ),
    on_write=(_farmer_active_crops,),
)

FARM = EntityConfig(
    name="farm",
    table="farm_c",
    fields=(
        Field("name", "name_c", mirror="Name"),
        Field("location", "location_c"),
        Field("size", "size_c", "float"),
        Field("status", "status_c", default="active"),
        Field("description", "description_c", default=""),
        Field("valuation", "valuation_c", "float"),
        Field("farmTypes", "farm_types_c", "list", default=list),
        Field("rating", "rating_c", "int", default=0, on_invalid=0),
        Field("createdAt", "created_at_c", default=utcnow_iso),
        Field("updatedAt", "updated_at_c"),
    ),
    on_write=(_farm_touch,),
)

CROP = EntityConfig(
    name="crop",
    table="crop_c",
    fields=(
        Field("name", "name_c", mirror="Name"),
        Field("variety", "variety_c"),
        Field("plantedDate", "planted_date_c"),
        Field("area", "area_c", "float"),
        Field("status", "status_c", default="planted"),
        Field("expectedHarvest", "expected_harvest_c"),
        Field("farmId", "farm_id_c", "relation"),
    ),
)

TASK = EntityConfig(
    name="task",
    table="task_c",
    fields=(
        Field("title", "title_c", mirror="Name"),
        Field("description", "description_c"),
        Field("dueDate", "due_date_c"),
        Field("priority", "priority_c", default="medium"),
        Field("completed", "completed_c", "bool", default=False),
        Field("completedAt", "completed_at_c"),
        Field("farmId", "farm_id_c", "relation"),
        Field("cropId", "crop_id_c", "relation"),
        Field("internalExternal", "internal_external_c"),
    ),
    on_write=(_task_completed_at,),
)

SUBTASK = EntityConfig(
    name="subtask",
    table="subtask_c",
    fields=(
        Field("name", "name_c", mirror="Name"),
        Field("taskId", "task_id_c", "relation"),
        Field("completed", "completed_c", "bool", default=False),
    ),
)

TRANSACTION = EntityConfig(
    name="transaction",
    table="transaction_c",
    fields=(
        Field("type", "type_c", default="expense"),
        Field("category", "category_c"),
        Field("amount", "amount_c", "float"),
        Field("description", "description_c"),
        Field("date", "date_c"),
        Field("farmId", "farm_id_c", "relation"),
    ),
)

WEATHER = EntityConfig(
    name="weather",
    table="weather_c",
    fields=(
        Field("location", "location_c", mirror="Name"),
        Field("temperature", "temperature_c", "float"),
        Field("condition", "condition_c"),
        Field("humidity", "humidity_c", "int"),
        Field("windSpeed", "wind_speed_c", "float"),
        Field("visibility", "visibility_c", "float"),
        Field("forecastDay", "forecast_day_c"),
        Field("forecastCondition", "forecast_condition_c"),
        Field("forecastHigh", "forecast_high_c", "float"),
        Field("forecastLow", "forecast_low_c", "float"),
        Field("alerts", "alerts_c", "list", default=list),
    ),
    extra_columns=("CreatedOn",),
)

ALL_ENTITIES = (FARMER, FARM, CROP, TASK, SUBTASK, TRANSACTION, WEATHER)
