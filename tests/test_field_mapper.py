"""Tests for the UI <-> storage field mapping."""

import pytest

from farm_manager_api.app.services import field_mapper
from farm_manager_api.app.services.entities import CROP, FARM, FARMER, SUBTASK, TASK, TRANSACTION, WEATHER
from farm_manager_api.app.services.field_mapper import Field, parse_float, parse_int


class TestCoercion:
    @pytest.mark.parametrize(
        "value, expected",
        [("42", 42), (" 7 acres", 7), ("-3", -3), ("12.9", 12), (5, 5), (5.8, 5), ("", None), ("  ", None), (None, None)],
    )
    def test_parse_int_takes_leading_digits(self, value, expected):
        assert parse_int(value) == expected

    def test_parse_int_invalid_uses_fallback(self):
        assert parse_int("abc") is None
        assert parse_int("abc", on_invalid=0) == 0
        assert parse_int(True, on_invalid=0) == 0

    @pytest.mark.parametrize(
        "value, expected",
        [("12.5", 12.5), ("3.25ha", 3.25), (".5", 0.5), ("1e3", 1000.0), (4, 4.0), ("", None)],
    )
    def test_parse_float_takes_numeric_prefix(self, value, expected):
        assert parse_float(value) == expected

    def test_parse_float_invalid_is_none(self):
        assert parse_float("n/a") is None

    def test_unknown_kind_is_rejected(self):
        with pytest.raises(ValueError):
            Field("x", "x_c", "date")


class TestToStorage:
    def test_create_fills_defaults_and_mirrors_name(self):
        storage = field_mapper.to_storage({"name": "Corn", "area": "12.5", "farmId": {"Id": 3}}, CROP.fields)
        assert storage["Name"] == "Corn"
        assert storage["name_c"] == "Corn"
        assert storage["area_c"] == 12.5
        assert storage["farm_id_c"] == 3
        assert storage["status_c"] == "planted"
        assert storage["variety_c"] is None
        assert "Id" not in storage

    def test_update_emits_only_present_fields(self):
        storage = field_mapper.to_storage({"status": "growing"}, CROP.fields, fill_defaults=False)
        assert storage == {"status_c": "growing"}

    def test_lists_are_joined(self):
        storage = field_mapper.to_storage({"primaryCrops": ["Corn", "Soy"]}, FARMER.fields, fill_defaults=False)
        assert storage == {"primary_crops_c": "Corn,Soy"}

    def test_nested_stats_are_flattened(self):
        storage = field_mapper.to_storage(
            {"name": "Ann", "stats": {"totalFarms": "3", "pendingTasks": 2}}, FARMER.fields
        )
        assert storage["total_farms_c"] == 3
        assert storage["pending_tasks_c"] == 2
        assert storage["active_crops_c"] == 0

    def test_invalid_rating_falls_back_to_zero(self):
        storage = field_mapper.to_storage({"name": "Hill", "rating": "great"}, FARM.fields)
        assert storage["rating_c"] == 0

    def test_blank_numeric_becomes_none(self):
        storage = field_mapper.to_storage({"valuation": ""}, FARM.fields, fill_defaults=False)
        assert storage == {"valuation_c": None}

    def test_callable_default_is_evaluated(self):
        storage = field_mapper.to_storage({"name": "Hill"}, FARM.fields)
        assert isinstance(storage["created_at_c"], str)
        assert storage["farm_types_c"] == ""


class TestFromStorage:
    def test_relation_objects_are_unwrapped(self):
        ui = field_mapper.from_storage({"Id": 4, "task_id_c": {"Id": 9, "Name": "Irrigate"}}, SUBTASK.fields)
        assert ui["Id"] == 4
        assert ui["taskId"] == 9
        assert ui["completed"] is False

    def test_mirror_is_used_when_column_blank(self):
        ui = field_mapper.from_storage({"Id": 1, "Name": "Meadow", "name_c": ""}, FARM.fields)
        assert ui["name"] == "Meadow"

    def test_lists_are_split_and_stripped(self):
        ui = field_mapper.from_storage({"Id": 1, "primary_crops_c": "Corn, Wheat ,"}, FARMER.fields)
        assert ui["primaryCrops"] == ["Corn", "Wheat"]

    def test_missing_list_is_empty(self):
        ui = field_mapper.from_storage({"Id": 1}, WEATHER.fields)
        assert ui["alerts"] == []

    def test_stats_are_nested(self):
        ui = field_mapper.from_storage(
            {"Id": 1, "total_farms_c": 2, "active_crops_c": 4, "pending_tasks_c": 0}, FARMER.fields
        )
        assert ui["stats"] == {"totalFarms": 2, "activeCrops": 4, "pendingTasks": 0}


@pytest.mark.parametrize(
    "config, ui",
    [
        (CROP, {"name": "Corn", "variety": "Sweet", "plantedDate": "2024-04-01", "area": 12.5,
                "status": "growing", "expectedHarvest": "2024-08-01", "farmId": 2}),
        (TASK, {"title": "Spray", "description": "North field", "dueDate": "2024-05-01", "priority": "high",
                "completed": True, "completedAt": "2024-05-02", "farmId": 1, "cropId": 3,
                "internalExternal": "external"}),
        (TRANSACTION, {"type": "income", "category": "crop_sales", "amount": 900.0, "description": "Market",
                       "date": "2024-05-05", "farmId": 1}),
        (SUBTASK, {"name": "Check nozzles", "taskId": 5, "completed": False}),
        (FARMER, {"name": "Ana Ruiz", "email": "ana@example.com", "phone": "555-0101", "dateOfBirth": "1980-02-14",
                  "gender": "female", "address": "1 Mill Rd", "farmName": "Ruiz Acres", "farmLocation": "Valley",
                  "farmSize": 40.5, "experience": 12, "primaryCrops": ["Corn", "Soybeans"], "status": "active",
                  "memberSince": "2021-03-01T00:00:00+00:00",
                  "stats": {"totalFarms": 2, "activeCrops": 2, "pendingTasks": 1}}),
        (FARM, {"name": "Ruiz Acres", "location": "Valley", "size": 40.5, "status": "planning", "description": "",
                "valuation": 250000.0, "farmTypes": ["Dairy", "Orchard"], "rating": 4,
                "createdAt": "2021-03-01T00:00:00+00:00", "updatedAt": "2024-01-01T00:00:00+00:00"}),
        (WEATHER, {"location": "Valley", "temperature": 18.5, "condition": "Cloudy", "humidity": 70,
                   "windSpeed": 11.0, "visibility": 8.0, "forecastDay": "Thursday", "forecastCondition": "Rain",
                   "forecastHigh": 21.0, "forecastLow": 12.0, "alerts": ["Frost warning", "High wind"]}),
    ],
    ids=lambda value: getattr(value, "name", None),
)
def test_declared_fields_survive_a_round_trip(config, ui):
    storage = field_mapper.to_storage(ui, config.fields)
    storage["Id"] = 11
    restored = field_mapper.from_storage(storage, config.fields)
    assert restored.pop("Id") == 11
    assert restored == ui


def test_projection_lists_mirror_and_columns():
    names = field_mapper.project(SUBTASK.fields)
    assert names == ["Name", "name_c", "task_id_c", "completed_c"]
