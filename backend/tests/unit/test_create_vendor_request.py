"""Unit tests for CreateVendorRequest schema validation"""

from datetime import date

import pytest
from pydantic import ValidationError

from domain.vendors import ContractType, CreateVendorRequest


def _payload(**overrides):
    data = {
        "name": "Maria Souza",
        "document": "529.982.247-25",
        "email": "maria.souza@acme.com.br",
        "contract_type": "CLT",
        "branch_id": "2",
    }
    data.update(overrides)
    return data


class TestCreateVendorRequest:
    """Test request parsing and normalization"""

    def test_parses_minimal_payload(self):
        request = CreateVendorRequest(**_payload())

        assert request.contract_type is ContractType.CLT
        assert request.document == "529.982.247-25"  # kept as typed
        assert request.birth_date is None

    def test_email_lowercased(self):
        request = CreateVendorRequest(**_payload(email="Maria.Souza@ACME.com.br"))
        assert request.email == "maria.souza@acme.com.br"

    def test_name_stripped(self):
        assert CreateVendorRequest(**_payload(name="  Maria Souza ")).name == "Maria Souza"

    def test_blank_name_rejected(self):
        with pytest.raises(ValidationError):
            CreateVendorRequest(**_payload(name="   "))

    def test_invalid_email_rejected(self):
        with pytest.raises(ValidationError):
            CreateVendorRequest(**_payload(email="not-an-email"))

    def test_unknown_contract_type_rejected(self):
        with pytest.raises(ValidationError):
            CreateVendorRequest(**_payload(contract_type="FREELANCER"))

    def test_json_round_trip(self):
        request = CreateVendorRequest(**_payload(birth_date="1990-05-17"))

        payload = request.model_dump(mode="json")

        assert payload["contract_type"] == "CLT"
        assert payload["birth_date"] == "1990-05-17"
        assert CreateVendorRequest.model_validate(payload).birth_date == date(1990, 5, 17)
