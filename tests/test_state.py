"""Tests for entities/state.py: ground attachment and the action machine."""

from __future__ import annotations

import logging
import math

import pytest

from entities.state import (
    Action,
    ActionEvent,
    AttachmentBand,
    PlayerState,
    Speed,
    attachment_band,
    reduce_angle,
    surface_trig,
    transition,
)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def airborne(action: Action = Action.DEFAULT) -> PlayerState:
    return PlayerState(ground=False, action=action)


def land(angle: float, xsp: float, ysp: float, downward: bool = True,
         action: Action = Action.DEFAULT, legacy: bool = False):
    state = airborne(action)
    speed = Speed(xsp=xsp, ysp=ysp, gsp=123.0, angle=angle)
    state.set_ground(True, speed, downward, legacy)
    return state, speed


def _angles():
    return [i * 0.5 for i in range(720)]


# Interval predicates written straight from the tuning table
_DOWNWARD = {
    AttachmentBand.SHALLOW: lambda a: 0 <= a <= 23 or 339 <= a <= 360,
    AttachmentBand.HALF_STEEP: lambda a: 23 < a <= 45 or 315 <= a < 339,
    AttachmentBand.FULL_STEEP: lambda a: 45 < a <= 90 or 270 <= a < 315,
}
_UPWARD = {
    AttachmentBand.SLOPE: lambda a: 90 < a <= 135 or 225 < a <= 270,
    AttachmentBand.CEILING: lambda a: 135 < a <= 225,
}


# ---------------------------------------------------------------------------
# Bands
# ---------------------------------------------------------------------------

class TestAttachmentBands:
    @pytest.mark.parametrize("downward,table", [(True, _DOWNWARD), (False, _UPWARD)])
    def test_at_most_one_band_per_angle(self, downward, table):
        for a in _angles():
            hits = [band for band, pred in table.items() if pred(a)]
            assert len(hits) <= 1, a
            expected = hits[0] if hits else None
            assert attachment_band(a, downward) is expected, a

    @pytest.mark.parametrize("angle,band", [
        (0.0, AttachmentBand.SHALLOW),
        (23.0, AttachmentBand.SHALLOW),
        (23.5, AttachmentBand.HALF_STEEP),
        (45.0, AttachmentBand.HALF_STEEP),
        (45.5, AttachmentBand.FULL_STEEP),
        (90.0, AttachmentBand.FULL_STEEP),
        (90.5, None),
        (269.5, None),
        (270.0, AttachmentBand.FULL_STEEP),
        (315.0, AttachmentBand.HALF_STEEP),
        (339.0, AttachmentBand.SHALLOW),
    ])
    def test_downward_boundaries(self, angle, band):
        assert attachment_band(angle, True) is band

    @pytest.mark.parametrize("angle,band", [
        (90.0, None),
        (135.0, AttachmentBand.SLOPE),
        (135.5, AttachmentBand.CEILING),
        (225.0, AttachmentBand.CEILING),
        (225.5, AttachmentBand.SLOPE),
        (270.0, AttachmentBand.SLOPE),
        (270.5, None),
    ])
    def test_upward_boundaries(self, angle, band):
        assert attachment_band(angle, False) is band

    def test_angles_reduced_before_banding(self):
        assert reduce_angle(720.0) == 0.0
        assert reduce_angle(-30.0) == pytest.approx(330.0)
        assert attachment_band(-30.0, True) is AttachmentBand.HALF_STEEP
        assert attachment_band(405.0, True) is AttachmentBand.HALF_STEEP


# ---------------------------------------------------------------------------
# set_ground
# ---------------------------------------------------------------------------

class TestLanding:
    def test_flat_landing_takes_xsp(self):
        state, speed = land(0.0, xsp=5.0, ysp=-3.0)
        assert state.ground is True
        assert speed.gsp == 5.0

    def test_half_steep_vertical_hit_is_damped(self):
        _, speed = land(30.0, xsp=1.0, ysp=4.0)
        assert speed.gsp == pytest.approx(-2.0)

    def test_half_steep_horizontal_hit_keeps_xsp(self):
        _, speed = land(30.0, xsp=5.0, ysp=4.0)
        assert speed.gsp == 5.0

    def test_full_steep_vertical_hit(self):
        _, speed = land(60.0, xsp=1.0, ysp=4.0)
        assert speed.gsp == pytest.approx(-4.0)
        _, speed = land(300.0, xsp=1.0, ysp=4.0)
        assert speed.gsp == pytest.approx(4.0)

    def test_outside_downward_bands_keeps_gsp(self):
        state, speed = land(180.0, xsp=1.0, ysp=4.0)
        assert state.ground is True
        assert speed.gsp == 123.0

    def test_upward_slope_contact(self):
        state, speed = land(100.0, xsp=0.0, ysp=-5.0, downward=False)
        assert state.ground is True
        assert speed.gsp == pytest.approx(5.0)

    @pytest.mark.parametrize("angle", [136.0, 180.0, 225.0])
    @pytest.mark.parametrize("xsp,ysp", [(0.0, -5.0), (3.0, -1.0), (-2.0, 0.5)])
    def test_ceiling_rejects_landing(self, angle, xsp, ysp):
        state, speed = land(angle, xsp=xsp, ysp=ysp, downward=False, action=Action.JUMPING)
        assert state.ground is False
        assert speed.ysp == 0.0
        assert state.action is Action.JUMPING

    def test_ceiling_rejection_logged(self, caplog):
        caplog.set_level(logging.DEBUG, logger="entities.state")
        land(180.0, xsp=0.0, ysp=-5.0, downward=False)
        assert "landing rejected" in caplog.text

    def test_landing_ends_jump(self):
        state, _ = land(0.0, xsp=1.0, ysp=2.0, action=Action.JUMPING)
        assert state.action is Action.DEFAULT

    def test_landing_keeps_rolling(self):
        state, _ = land(0.0, xsp=1.0, ysp=2.0, action=Action.ROLLING)
        assert state.action is Action.ROLLING

    def test_grounded_release_only_touches_flag(self):
        state = PlayerState(ground=True, action=Action.DEFAULT)
        speed = Speed(xsp=1.0, ysp=0.0, gsp=1.0, angle=30.0)
        state.set_ground(False, speed, True)
        assert state.ground is False
        assert speed.gsp == 1.0
        assert speed.ysp == 0.0

    def test_grounded_stays_grounded_without_recompute(self):
        state = PlayerState(ground=True)
        speed = Speed(xsp=9.0, ysp=9.0, gsp=1.0)
        state.set_ground(True, speed, True)
        assert speed.gsp == 1.0


class TestLegacyTrig:
    """The first engine fed degree angles straight into sin/cos."""

    def test_surface_trig_default_is_degrees(self):
        sin_a, cos_a = surface_trig(90.0)
        assert sin_a == pytest.approx(1.0)
        assert cos_a == pytest.approx(0.0, abs=1e-12)

    def test_surface_trig_legacy_uses_raw_value(self):
        sin_a, cos_a = surface_trig(90.0, legacy=True)
        assert sin_a == math.sin(90.0)
        assert cos_a == math.cos(90.0)

    def test_half_steep_sign_differs_under_legacy(self):
        # sin(30 rad) is negative, sin(30 deg) is positive
        _, speed = land(30.0, xsp=1.0, ysp=4.0, legacy=True)
        assert speed.gsp == pytest.approx(2.0)


# ---------------------------------------------------------------------------
# Action machine
# ---------------------------------------------------------------------------

class TestTransition:
    def test_skidding_never_airborne(self):
        for event in ActionEvent:
            for action in Action:
                assert transition(action, event, ground=False) is not Action.SKIDDING

    def test_brake_only_from_default_or_skidding(self):
        assert transition(Action.DEFAULT, ActionEvent.BRAKE, True) is Action.SKIDDING
        assert transition(Action.SKIDDING, ActionEvent.BRAKE, True) is Action.SKIDDING
        assert transition(Action.ROLLING, ActionEvent.BRAKE, True) is Action.ROLLING
        assert transition(Action.CROUCHING, ActionEvent.BRAKE, True) is Action.CROUCHING

    def test_airborne_clears_skid(self):
        assert transition(Action.SKIDDING, ActionEvent.AIRBORNE, False) is Action.DEFAULT
        assert transition(Action.JUMPING, ActionEvent.AIRBORNE, False) is Action.JUMPING

    def test_release_only_ends_looking(self):
        assert transition(Action.CROUCHING, ActionEvent.RELEASE, True) is Action.DEFAULT
        assert transition(Action.LOOKING_UP, ActionEvent.RELEASE, True) is Action.DEFAULT
        for action in (Action.JUMPING, Action.ROLLING, Action.SKIDDING, Action.DEFAULT):
            assert transition(action, ActionEvent.RELEASE, True) is action

    def test_look_overrides_any_action(self):
        for action in Action:
            assert transition(action, ActionEvent.LOOK_UP, True) is Action.LOOKING_UP
            assert transition(action, ActionEvent.CROUCH, True) is Action.CROUCHING

    def test_apply_updates_state(self):
        state = PlayerState()
        assert state.apply(ActionEvent.JUMP) is Action.JUMPING
        assert state.action is Action.JUMPING

    def test_spawn_state(self):
        state = PlayerState()
        assert state.ground is True
        assert state.action is Action.DEFAULT
