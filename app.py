# app.py
import logging
import threading
from collections import deque
from dataclasses import asdict

from flask import Flask, jsonify, request

from flightrisk.tracking import FlightTracker, TrackerConfig, InvalidCallsignError, NotTrackingError

app = Flask(__name__)
log = logging.getLogger('werkzeug')
log.setLevel(logging.WARNING)

# Global State Dictionary
state = {
    'tracker': None,
    'tracker_thread': None,
    'config': TrackerConfig(),
    'recent_flights': deque(maxlen=TrackerConfig().recent_flights_limit),
    'lock': threading.Lock(),
}


def get_tracker() -> FlightTracker:
    """Builds the network-backed tracker on first use."""
    if state['tracker'] is None:
        state['tracker'] = FlightTracker.from_config(state['config'])
    return state['tracker']


def _state_payload(flight_state) -> dict:
    payload = asdict(flight_state)
    payload['tracking'] = get_tracker().is_running
    return payload


@app.route('/track', methods=['POST'])
def track():
    data = request.get_json(silent=True) or {}
    callsign = data.get('callsign')
    if not callsign:
        return jsonify({'error': 'callsign is required.'}), 400

    tracker = get_tracker()
    with state['lock']:
        tracker.stop()
        try:
            flight_state = tracker.start(callsign)
        except InvalidCallsignError as e:
            return jsonify({'error': str(e)}), 400

        if flight_state is None:
            return jsonify({'error': 'Flight not found', 'callsign': callsign.strip().upper()}), 404

        state['recent_flights'].appendleft(asdict(flight_state.flight))
        thread = threading.Thread(target=tracker.run, daemon=True)
        state['tracker_thread'] = thread
        thread.start()

    logging.info(f"Started tracking {flight_state.flight.callsign}.")
    return jsonify(_state_payload(flight_state))


@app.route('/position')
def position():
    tracker = get_tracker()
    if tracker.state is None:
        return jsonify({'error': 'No flight is being tracked.'}), 404
    flight_state = tracker.state
    return jsonify({
        'callsign': flight_state.flight.callsign,
        'kinematics': asdict(flight_state.flight.kinematics),
        'path': [asdict(p) for p in flight_state.path],
        'source': flight_state.source,
        'tick_count': flight_state.tick_count,
        'last_update': flight_state.last_update,
    })


@app.route('/risk')
def risk():
    tracker = get_tracker()
    if tracker.state is None or tracker.state.risk is None:
        return jsonify({'error': 'No flight is being tracked.'}), 404
    return jsonify(asdict(tracker.state.risk))


@app.route('/refresh', methods=['POST'])
def refresh():
    """Forces an immediate tick. Answers 409 if a tick is already in progress."""
    try:
        flight_state = get_tracker().tick()
    except NotTrackingError as e:
        return jsonify({'error': str(e)}), 404
    if flight_state is None:
        return jsonify({'error': 'A tracking update is already in progress.'}), 409
    return jsonify(_state_payload(flight_state))


@app.route('/stop', methods=['POST'])
def stop():
    get_tracker().stop()
    return jsonify({'success': True, 'message': 'Tracking stopped.'})


@app.route('/recent')
def recent():
    return jsonify(list(state['recent_flights']))


if __name__ == '__main__':
    logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(levelname)s - %(message)s')
    app.run(debug=True, use_reloader=False)
