"""Tests for cross-validation of the primality tests."""

import json

import pytest

from primality.evaluation.crosscheck import CrossCheckResult, MethodResult, cross_validate
from primality.core.errors import InvalidArgumentError


class TestCrossValidate:
    """Tests for cross_validate."""

    def test_agreement_up_to_200(self):
        """Test that all methods agree on a small range."""
        result = cross_validate(200, seed=1)
        assert result.agree
        assert set(result.methods) == {'aks', 'miller_rabin', 'sieve'}
        for method in result.methods.values():
            assert method.count == 46
            assert method.elapsed >= 0

    def test_to_dict_is_serializable(self):
        """Test dictionary conversion."""
        d = cross_validate(50).to_dict()
        assert d['max_n'] == 50
        assert d['agree'] is True
        assert d['methods']['aks']['count'] == 15
        json.dumps(d)

    def test_invalid_range(self):
        """Test that max_n < 1 raises."""
        with pytest.raises(InvalidArgumentError):
            cross_validate(0)


class TestCrossCheckResult:
    """Tests for CrossCheckResult."""

    def test_disagreement_flag(self):
        """Test the agree property."""
        result = CrossCheckResult(max_n=10, disagreements=[9])
        assert not result.agree

    def test_method_result(self):
        """Test MethodResult bookkeeping."""
        method = MethodResult(name="sieve", primes=[2, 3, 5, 7])
        assert method.count == 4
        assert method.to_dict() == {'name': "sieve", 'count': 4, 'elapsed': 0.0}
