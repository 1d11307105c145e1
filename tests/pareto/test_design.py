"""
Tests for ParetoDistribution construction, validation and accessors.
"""

import re
from dataclasses import FrozenInstanceError, replace

import numpy as np
import pytest

from paretostats.core.exceptions import DomainError, DomainWarning, ValidationError
from paretostats.core.policies import IgnorePolicy, RaisePolicy, WarnPolicy
from paretostats.pareto import ParetoDistribution, pareto


class TestConstruction:

    def test_defaults(self):
        d = ParetoDistribution()
        assert d.location == 1.0
        assert d.shape == 1.0
        assert d.dtype == np.float64
        assert isinstance(d.policy, RaisePolicy)

    def test_accessors(self, dist):
        assert dist.location == 2.0
        assert dist.shape == 3.0

    def test_integer_parameters_converted(self):
        d = ParetoDistribution(2, 3)
        assert d.location.dtype == np.float64
        assert d.shape.dtype == np.float64

    def test_float32(self):
        d = ParetoDistribution(2.0, 3.0, dtype=np.float32)
        assert d.dtype == np.float32
        assert d.location.dtype == np.float32
        assert d.shape.dtype == np.float32

    def test_alias(self):
        assert pareto is ParetoDistribution
        assert pareto(2.0, 3.0) == ParetoDistribution(2.0, 3.0)

    def test_repr(self, dist):
        assert repr(dist) == "ParetoDistribution(location=2.0, shape=3.0, dtype=float64)"

    def test_is_valid(self, dist):
        assert dist.is_valid
        assert not ParetoDistribution(-1.0, 3.0, policy='ignore').is_valid


class TestValueSemantics:

    def test_frozen(self, dist):
        with pytest.raises(FrozenInstanceError):
            dist.shape = 4.0

    def test_equality_ignores_policy(self):
        assert ParetoDistribution(2.0, 3.0) == ParetoDistribution(2.0, 3.0, policy='ignore')

    def test_hashable(self, dist):
        assert len({dist, ParetoDistribution(2.0, 3.0)}) == 1

    def test_replace_builds_new_instance(self, dist):
        d2 = replace(dist, shape=4.0)
        assert d2.shape == 4.0
        assert dist.shape == 3.0

    def test_replace_revalidates(self, dist):
        with pytest.raises(DomainError, match="Shape parameter"):
            replace(dist, shape=-1.0)


class TestParameterValidation:

    def test_negative_location(self):
        msg = "Location parameter is -1.0, but must be > 0!"
        with pytest.raises(DomainError, match=re.escape(msg)) as exc_info:
            ParetoDistribution(-1.0, 3.0)
        assert exc_info.value.value == -1.0
        assert exc_info.value.function.endswith("ParetoDistribution")

    def test_zero_location(self):
        with pytest.raises(DomainError, match="Location parameter is 0.0, but must be > 0!"):
            ParetoDistribution(0.0, 3.0)

    @pytest.mark.parametrize("location", [np.nan, np.inf])
    def test_non_finite_location(self, location):
        with pytest.raises(DomainError, match="Location parameter is .*, but must be finite!"):
            ParetoDistribution(location, 3.0)

    def test_nan_shape(self):
        with pytest.raises(DomainError, match="Shape parameter is nan, but must be finite!"):
            ParetoDistribution(2.0, np.nan)

    def test_infinite_shape(self):
        with pytest.raises(DomainError, match="Shape parameter is inf, but must be finite!"):
            ParetoDistribution(2.0, np.inf)

    def test_negative_shape(self):
        with pytest.raises(DomainError, match=r"Shape parameter is -2\.0, but must be > 0!"):
            ParetoDistribution(2.0, -2.0)

    def test_location_checked_before_shape(self):
        policy = IgnorePolicy()
        ParetoDistribution(-1.0, np.nan, policy=policy)
        assert len(policy.errors) == 1
        assert policy.last_error.message.startswith("Location parameter")

    @pytest.mark.filterwarnings("ignore::RuntimeWarning")
    def test_float32_overflowing_parameter_is_not_finite(self):
        with pytest.raises(DomainError, match="must be finite"):
            ParetoDistribution(1e300, 3.0, dtype=np.float32)


class TestNonRaisingConstruction:

    def test_ignore_policy_constructs(self):
        policy = IgnorePolicy()
        d = ParetoDistribution(-1.0, 3.0, policy=policy)
        assert d.location == -1.0
        assert policy.last_error.message == "Location parameter is -1.0, but must be > 0!"

    def test_warn_policy_warns(self):
        with pytest.warns(DomainWarning, match="Shape parameter is 0.0"):
            d = ParetoDistribution(1.0, 0.0, policy='warn')
        assert isinstance(d.policy, WarnPolicy)


class TestApiMisuse:

    def test_string_parameter(self):
        with pytest.raises(ValidationError, match="location:"):
            ParetoDistribution("2", 3.0)

    def test_unsupported_dtype(self):
        with pytest.raises(ValidationError, match="dtype:"):
            ParetoDistribution(2.0, 3.0, dtype=np.int32)

    def test_unknown_policy(self):
        with pytest.raises(ValidationError, match="unknown policy"):
            ParetoDistribution(2.0, 3.0, policy='loud')
