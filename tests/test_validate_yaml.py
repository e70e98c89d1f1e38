#!/usr/bin/env python3
"""Tests for validate_yaml schema validation."""

from pathlib import Path

from validate_yaml import describe_entry, load_schema, main, validate_fleet_file

SAMPLE_FLEET = Path(__file__).parent.parent / "data" / "sample_fleet.yaml"


class TestLoadSchema:
    """Tests for load_schema function."""

    def test_returns_dict(self):
        schema = load_schema()
        assert isinstance(schema, dict)

    def test_has_expected_structure(self):
        schema = load_schema()
        assert "vehicles" in schema["properties"]
        assert "drivers" in schema["properties"]


class TestValidateFleetFile:
    """Tests for validate_fleet_file function."""

    def test_sample_fleet_is_valid(self):
        assert validate_fleet_file(SAMPLE_FLEET, load_schema()) == []

    def test_valid_minimal_returns_no_errors(self, tmp_path):
        path = tmp_path / "valid.yaml"
        path.write_text("""
vehicles:
  - type: motorcycle
    id: 8
    licensePlate: MOT-0001
    make: Yamaha
    model: MT-07
    year: 2023
    engineDisplacement: 689
""")
        assert validate_fleet_file(path, load_schema()) == []

    def test_missing_variant_field(self, tmp_path):
        path = tmp_path / "invalid.yaml"
        path.write_text("""
vehicles:
  - type: bus
    id: 6
    licensePlate: BUS-0001
    make: Volvo
    model: '9700'
    year: 2022
    passengerCapacity: 55
    grossVehicleWeight: 20.0
""")
        errors = validate_fleet_file(path, load_schema())
        assert len(errors) >= 1
        assert "serviceType" in errors[0]

    def test_out_of_range_value(self, tmp_path):
        path = tmp_path / "invalid.yaml"
        path.write_text("""
vehicles:
  - type: truck
    id: 4
    licensePlate: TRK-0001
    make: Volvo
    model: FH16
    year: 2020
    payloadCapacity: 100
    axleCount: 1
    grossVehicleWeight: 16.0
""")
        errors = validate_fleet_file(path, load_schema())
        assert any("Schema validation error" in e for e in errors)
        assert any("vehicles.0.axleCount" in e for e in errors)

    def test_invalid_yaml(self, tmp_path):
        path = tmp_path / "broken.yaml"
        path.write_text("vehicles: [unclosed\n")
        errors = validate_fleet_file(path, load_schema())
        assert errors[0].startswith("YAML parse error")


class TestMain:
    def test_validates_given_files(self, capsys):
        assert main([str(SAMPLE_FLEET)]) == 0
        assert "OK: sample_fleet.yaml" in capsys.readouterr().out

    def test_reports_failures(self, tmp_path, capsys):
        path = tmp_path / "bad.yaml"
        path.write_text("drivers:\n  - fullName: X\n")
        assert main([str(path)]) == 1
        assert "FAIL: bad.yaml" in capsys.readouterr().out


class TestFleetSpecificMessages:
    """Errors name the offending entry and explain unquoted dates."""

    def test_names_failing_vehicle(self, tmp_path):
        path = tmp_path / "invalid.yaml"
        path.write_text("""
vehicles:
  - type: motorcycle
    id: 8
    licensePlate: MOT-0001
    make: Yamaha
    model: MT-07
    year: 2023
    engineDisplacement: 689
  - type: truck
    id: 4
    licensePlate: TRK-0001
    make: Volvo
    model: FH16
    year: 2020
    payloadCapacity: 100
    axleCount: 1
    grossVehicleWeight: 16.0
""")
        errors = validate_fleet_file(path, load_schema())
        assert "  in vehicle TRK-0001" in errors

    def test_unquoted_date_hint(self, tmp_path):
        path = tmp_path / "invalid.yaml"
        path.write_text("""
vehicles:
  - type: motorcycle
    id: 8
    licensePlate: MOT-0001
    make: Yamaha
    model: MT-07
    year: 2023
    engineDisplacement: 689
    maintenance:
      - date: 2025-06-15
        type: PREVENTIVE
""")
        errors = validate_fleet_file(path, load_schema())
        assert "  in vehicle MOT-0001" in errors
        assert any("quote dates" in e for e in errors)

    def test_describe_entry(self):
        data = {"drivers": [{"fullName": "A", "licenseNumber": "LIC-1"}]}
        assert describe_entry(data, ["drivers", 0, "yearsOfExperience"]) == "driver LIC-1"
        assert describe_entry(data, ["drivers", 5]) is None
        assert describe_entry(data, ["vehicles"]) is None
        assert describe_entry(None, ["drivers", 0]) is None

    def test_summary_for_several_files(self, tmp_path, capsys):
        bad = tmp_path / "bad.yaml"
        bad.write_text("drivers:\n  - fullName: X\n")
        assert main([str(SAMPLE_FLEET), str(bad)]) == 1
        assert "1/2 fleet files valid" in capsys.readouterr().out
