from datetime import date
from jinja2 import Environment, PackageLoader, select_autoescape
from markupsafe import Markup
from medprosana.client.state import TABS, LIST_VIEW, DETAIL_VIEW


def calculate_age(birthdate, today=None):
    """Age in whole years, or 'N/A' when the birthdate is missing or unreadable."""
    if not birthdate:
        return 'N/A'
    try:
        born = date.fromisoformat(str(birthdate)[:10])
    except ValueError:
        return 'N/A'
    today = today or date.today()
    return today.year - born.year - ((today.month, today.day) < (born.month, born.day))


def weight_loss(session):
    """Pre minus post weight with two decimals; 'N/A' unless both weights are set."""
    try:
        pre = float(session.get('pre_weight'))
        post = float(session.get('post_weight'))
    except (TypeError, ValueError):
        return 'N/A'
    if not pre or not post:
        return 'N/A'
    return f"{pre - post:.2f}"


def record_date(record):
    return record.get('date') or (record.get('created_at') or '')[:10]


env = Environment(
    loader=PackageLoader('medprosana.client', 'templates'),
    autoescape=select_autoescape(['html']),
    trim_blocks=True,
    lstrip_blocks=True,
)
env.filters['age'] = calculate_age
env.filters['weight_loss'] = weight_loss
env.filters['record_date'] = record_date


def _render(template_name, **context):
    return env.get_template(template_name).render(**context)


def render_patient_list(state):
    return _render('roster.html', patients=state.patient_list)


def render_patient_detail(state):
    return _render(
        'detail.html',
        patient=state.current_patient,
        tabs=TABS,
        current_tab=state.current_tab,
    )


def render_app(state):
    """Renders the main content area for the current view."""
    # Full loader only on first load; detail refreshes keep the page
    if state.is_loading and not state.current_patient:
        return _render('loading.html')

    if state.view == LIST_VIEW:
        return render_patient_list(state)
    if state.view == DETAIL_VIEW and state.current_patient:
        return render_patient_detail(state)
    return ''


def render_notifications(state):
    return _render('notifications.html', notifications=state.notifications)


def render_page(state, title='MedProSana'):
    """A standalone HTML document: status line, toasts and the current view."""
    return _render(
        'page.html',
        title=title,
        status=state.status,
        notifications=Markup(render_notifications(state)),
        content=Markup(render_app(state)),
    )
