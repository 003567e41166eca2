# flightrisk/tracking/core.py
"""
The tracking loop. FlightTracker owns the one mutable FlightState and is its
only writer; everything it calls per tick is either a pure function or an
adapter that answers None instead of raising.

Each tick fetches live telemetry (or dead-reckons when there is none), then
fetches weather and conflict data concurrently and joins both before the
overall risk is aggregated.
"""
import logging
import threading
import time
from concurrent.futures import ThreadPoolExecutor
from dataclasses import replace
from typing import Callable, Optional

from ..conflict.core import ConflictRiskEngine
from ..conflict.data_models import ConflictAssessment
from ..geo.data_models import GeoPoint
from ..providers.exceptions import ProviderError
from ..weather.data_models import WeatherRisk
from ..weather.scoring import WeatherRiskScorer
from .aggregator import RiskAggregator
from .data_models import FlightState, RiskAssessment, TrackerConfig
from .exceptions import InvalidCallsignError, NotTrackingError
from .extrapolation import PositionExtrapolator

logger = logging.getLogger(__name__)


class FlightTracker:
    """Tracks one flight at a time and recomputes its risk on every tick."""

    def __init__(self, telemetry_provider, weather_provider, conflict_dataset,
                 config: Optional[TrackerConfig] = None,
                 weather_scorer: Optional[WeatherRiskScorer] = None,
                 conflict_engine: Optional[ConflictRiskEngine] = None,
                 clock: Callable[[], float] = time.time):
        """
        Args:
            telemetry_provider: Anything with get_flight(callsign) -> FlightData | None
            weather_provider: Anything with get_observation(lat, lon) -> WeatherObservation | None
            conflict_dataset: Anything with load() -> list[ConflictZone] | None
        """
        self.config = config or TrackerConfig()
        self.telemetry = telemetry_provider
        self.weather_provider = weather_provider
        self.conflict_dataset = conflict_dataset
        self.weather_scorer = weather_scorer or WeatherRiskScorer()
        self.conflict_engine = conflict_engine or ConflictRiskEngine()
        self._clock = clock

        self.state: Optional[FlightState] = None
        self._tick_lock = threading.Lock()
        self._stop_event = threading.Event()
        self._executor = ThreadPoolExecutor(max_workers=self.config.max_workers, thread_name_prefix="risk-fetch")

    @classmethod
    def from_config(cls, config: Optional[TrackerConfig] = None) -> "FlightTracker":
        """Builds a tracker wired to the default network adapters."""
        from ..providers.conflicts import ConflictDataset
        from ..providers.telemetry import AdsbTelemetryProvider
        from ..providers.weather import OpenMeteoWeatherProvider

        config = config or TrackerConfig()
        return cls(
            telemetry_provider=AdsbTelemetryProvider(cache_enabled=config.cache_enabled),
            weather_provider=OpenMeteoWeatherProvider(cache_enabled=config.cache_enabled),
            conflict_dataset=ConflictDataset(config.conflict_source),
            config=config,
        )

    # --- Lifecycle ---

    def start(self, callsign: str) -> Optional[FlightState]:
        """
        Acquires a flight and computes its first risk picture.

        Returns None when the flight cannot be found, which callers should
        report as "not found" rather than as a zero-risk flight.
        """
        if not isinstance(callsign, str) or not callsign.strip():
            raise InvalidCallsignError(f"Invalid callsign: {callsign!r}")

        flight = self.telemetry.get_flight(callsign)
        if flight is None:
            logger.info(f"Flight {callsign.strip().upper()} not found.")
            return None

        position = flight.kinematics.position
        risk = self.assess_risk(position, flight.origin.position, flight.destination.position)
        self.state = FlightState(flight=flight, path=[position], risk=risk, source="live",
                                 last_update=self._clock())
        # A fresh event per flight, so a loop still draining from the previous flight stays stopped
        self._stop_event = threading.Event()
        logger.info(f"Tracking {flight.callsign}: {flight.origin.code} -> {flight.destination.code}, "
                    f"overall risk {risk.overall_risk}")
        return self.state

    def tick(self) -> Optional[FlightState]:
        """
        Runs one tracking update. A tick requested while the previous one is
        still in flight is skipped and returns None.
        """
        if self.state is None:
            raise NotTrackingError("No flight is being tracked. Call start() first.")
        if not self._tick_lock.acquire(blocking=False):
            logger.debug("Previous tick still running; skipping this one.")
            return None
        try:
            return self._run_tick()
        finally:
            self._tick_lock.release()

    def run(self) -> None:
        """Ticks every interval_sec until stop() is called. Meant for a background thread."""
        if self.state is None:
            raise NotTrackingError("No flight is being tracked. Call start() first.")
        logger.info(f"Tracking loop started for {self.state.flight.callsign} "
                    f"(interval {self.config.interval_sec}s).")
        stop_event = self._stop_event
        while not stop_event.wait(self.config.interval_sec):
            try:
                self.tick()
            except Exception as e:
                logger.error(f"Tracking tick failed: {e}", exc_info=True)
        logger.info("Tracking loop stopped.")

    def stop(self) -> None:
        self._stop_event.set()

    def close(self) -> None:
        self.stop()
        self._executor.shutdown(wait=False)

    @property
    def is_running(self) -> bool:
        return self.state is not None and not self._stop_event.is_set()

    # --- Risk pipeline ---

    def assess_risk(self, position: GeoPoint, origin: GeoPoint, destination: GeoPoint) -> RiskAssessment:
        """Weather and conflict risk for one position, fetched concurrently and merged."""
        weather_future = self._executor.submit(self._weather_risk, position)
        conflict_future = self._executor.submit(self._conflict_risk, origin, destination, position)
        weather = weather_future.result()
        conflict = conflict_future.result()

        overall = RiskAggregator.overall(weather.score, conflict.composite)
        return RiskAssessment(
            weather_risk=weather.score,
            conflict_risk=conflict.composite,
            overall_risk=overall,
            nearest_conflict=conflict.nearest_conflict,
            airport_risk=conflict.airport.score,
            path_risk=conflict.path.score,
            position_risk=conflict.position.score if conflict.position else None,
            level=RiskAggregator.level(overall),
            advisory=RiskAggregator.advisory(overall),
            weather=weather,
        )

    def _run_tick(self) -> FlightState:
        state = self.state
        now = self._clock()
        live = self.telemetry.get_flight(state.flight.callsign)
        if live is not None:
            flight, source = live, "live"
        else:
            # Dead reckon over the wall-clock time since the last fix
            elapsed = max(0.0, now - state.last_update)
            moved = PositionExtrapolator.advance(state.flight.kinematics, elapsed)
            flight, source = replace(state.flight, kinematics=moved), "extrapolated"

        position = flight.kinematics.position
        risk = self.assess_risk(position, flight.origin.position, flight.destination.position)

        state.flight = flight
        state.path.append(position)
        if len(state.path) > self.config.max_path_points:
            del state.path[:-self.config.max_path_points]
        state.risk = risk
        state.source = source
        state.tick_count += 1
        state.last_update = now
        logger.debug(f"Tick {state.tick_count} ({source}): ({position.lat:.4f}, {position.lon:.4f}) "
                     f"overall risk {risk.overall_risk}")
        return state

    def _weather_risk(self, position: GeoPoint) -> WeatherRisk:
        try:
            observation = self.weather_provider.get_observation(position.lat, position.lon)
        except ProviderError as e:
            logger.error(f"Weather provider failed: {e}")
            observation = None
        return self.weather_scorer.score(observation)

    def _conflict_risk(self, origin: GeoPoint, destination: GeoPoint, position: GeoPoint) -> ConflictAssessment:
        try:
            conflicts = self.conflict_dataset.load()
        except ProviderError as e:
            logger.error(f"Conflict dataset failed: {e}")
            conflicts = None
        return self.conflict_engine.assess(
            origin, destination, conflicts, position,
            airport_radius_km=self.config.airport_radius_km,
            corridor_km=self.config.path_corridor_km,
            position_radius_km=self.config.position_radius_km,
        )
