"""Unit tests for contract types and registration code formatting"""

import pytest

from domain.vendors import ContractType, DocumentKind, format_registration_code


class TestContractType:
    """Test contract type to document kind mapping"""

    def test_document_kinds(self):
        assert ContractType.CLT.document_kind is DocumentKind.CPF
        assert ContractType.PESSOA_JURIDICA.document_kind is DocumentKind.CNPJ
        assert ContractType.OUTSOURCING.document_kind is DocumentKind.CPF

    def test_suffixes(self):
        assert ContractType.CLT.registration_suffix == "CLT"
        assert ContractType.PESSOA_JURIDICA.registration_suffix == "PJ"
        assert ContractType.OUTSOURCING.registration_suffix == "OUT"

    def test_only_pessoa_juridica_is_corporate(self):
        assert [c for c in ContractType if c.is_corporate] == [ContractType.PESSOA_JURIDICA]

    def test_document_lengths(self):
        assert DocumentKind.CPF.length == 11
        assert DocumentKind.CNPJ.length == 14


class TestFormatRegistrationCode:
    """Test %08d-SUFFIX formatting"""

    def test_first_code(self):
        assert format_registration_code(1, ContractType.CLT) == "00000001-CLT"

    def test_suffix_follows_contract_type(self):
        assert format_registration_code(42, ContractType.PESSOA_JURIDICA) == "00000042-PJ"
        assert format_registration_code(7, ContractType.OUTSOURCING) == "00000007-OUT"

    def test_width_grows_past_eight_digits(self):
        assert format_registration_code(99999999, ContractType.CLT) == "99999999-CLT"
        assert format_registration_code(123456789, ContractType.CLT) == "123456789-CLT"

    @pytest.mark.parametrize("sequence", [0, -1])
    def test_non_positive_sequence_rejected(self, sequence):
        with pytest.raises(ValueError):
            format_registration_code(sequence, ContractType.CLT)
