"""
Client-side state for the roster and patient detail views.

State is an immutable ``ClientState``; every change goes through a typed
action and the pure ``reduce`` function, and the ``Store`` holds the current
value and notifies subscribers after each dispatch.
"""
from dataclasses import dataclass, field, replace

LIST_VIEW = 'list'
DETAIL_VIEW = 'detail'

TABS = (
    ('info', 'Demographics'),
    ('sessions', 'Dialysis Sessions'),
    ('meds', 'Medications'),
    ('labs', 'Lab Results'),
    ('protocol', 'HD Protocol'),
)
TAB_IDS = tuple(tab_id for tab_id, _ in TABS)


def _newest_first(records):
    return tuple(sorted(records or (), key=lambda r: r.get('created_at') or '', reverse=True))


@dataclass(frozen=True)
class Notification:
    message: str
    level: str = 'success'  # 'success', 'error', 'warning' or 'info'


@dataclass(frozen=True)
class PatientDetail:
    """A roster entry with its records attached."""
    id: int
    name: str
    familyname: str
    birthdate: str = None
    created_at: str = None
    medications: tuple = ()
    lab_results: tuple = ()
    sessions: tuple = ()
    protocol: dict = field(default_factory=dict)

    @property
    def full_name(self):
        return f"{self.name} {self.familyname}"

    @classmethod
    def from_api(cls, patient, medications=None, lab_results=None, sessions=None, protocol=None):
        return cls(
            id=patient['id'],
            name=patient.get('name', ''),
            familyname=patient.get('familyname', ''),
            birthdate=patient.get('birthdate'),
            created_at=patient.get('created_at'),
            medications=_newest_first(medications),
            lab_results=_newest_first(lab_results),
            sessions=_newest_first(sessions),
            protocol=dict(protocol or {}),
        )


@dataclass(frozen=True)
class ClientState:
    view: str = LIST_VIEW
    patient_list: tuple = ()
    current_patient: PatientDetail = None
    current_tab: str = 'info'
    is_loading: bool = False
    notifications: tuple = ()
    status: Notification = None


# --- Actions ---

@dataclass(frozen=True)
class LoadingChanged:
    is_loading: bool


@dataclass(frozen=True)
class RosterLoaded:
    patients: list


@dataclass(frozen=True)
class PatientSelected:
    patient: dict


@dataclass(frozen=True)
class DetailLoaded:
    patient: dict
    medications: list = None
    lab_results: list = None
    sessions: list = None
    protocol: dict = None


@dataclass(frozen=True)
class DetailFailed:
    pass


@dataclass(frozen=True)
class TabSelected:
    tab: str


@dataclass(frozen=True)
class BackToList:
    pass


@dataclass(frozen=True)
class Notified:
    message: str
    level: str = 'success'


@dataclass(frozen=True)
class NotificationsCleared:
    pass


@dataclass(frozen=True)
class StatusChanged:
    message: str
    level: str = 'info'


def reduce(state, action):
    """Returns the state that results from applying ``action``."""
    if isinstance(action, LoadingChanged):
        return replace(state, is_loading=action.is_loading)

    if isinstance(action, RosterLoaded):
        roster = sorted(action.patients or (), key=lambda p: (p.get('familyname') or '').lower())
        return replace(state, patient_list=tuple(roster))

    if isinstance(action, PatientSelected):
        return replace(
            state,
            view=DETAIL_VIEW,
            current_tab='info',
            current_patient=PatientDetail.from_api(action.patient),
        )

    if isinstance(action, DetailLoaded):
        return replace(state, current_patient=PatientDetail.from_api(
            action.patient,
            medications=action.medications,
            lab_results=action.lab_results,
            sessions=action.sessions,
            protocol=action.protocol,
        ))

    if isinstance(action, (DetailFailed, BackToList)):
        return replace(state, view=LIST_VIEW, current_patient=None, current_tab='info')

    if isinstance(action, TabSelected):
        if action.tab not in TAB_IDS:
            return state
        return replace(state, current_tab=action.tab)

    if isinstance(action, Notified):
        return replace(state, notifications=state.notifications + (Notification(action.message, action.level),))

    if isinstance(action, NotificationsCleared):
        return replace(state, notifications=())

    if isinstance(action, StatusChanged):
        return replace(state, status=Notification(action.message, action.level))

    raise TypeError(f"Unknown action: {action!r}")


class Store:
    """Holds the current ClientState and applies actions to it."""

    def __init__(self, state=None):
        self._state = state or ClientState()
        self._listeners = []

    @property
    def state(self):
        return self._state

    def dispatch(self, action):
        self._state = reduce(self._state, action)
        for listener in list(self._listeners):
            listener(self._state)
        return self._state

    def subscribe(self, listener):
        self._listeners.append(listener)

        def unsubscribe():
            if listener in self._listeners:
                self._listeners.remove(listener)
        return unsubscribe
