import click
from flask import current_app
from flask.cli import with_appcontext
from medprosana.extensions import db
from medprosana.models.patient_models import Patient, Protocol
from medprosana.models.record_models import Medication, LabResult, DialysisSession

DEMO_PATIENTS = [
    {
        'name': 'Amina', 'familyname': 'Benali', 'birthdate': '1961-04-12',
        'medications': [('EPO', '4000 UI x3/week'), ('Heparin', '5000 UI per session')],
        'labs': [('Potassium', '5.1 mmol/L'), ('Urea', '18 mmol/L')],
        'sessions': [
            {'pre_weight': 72.4, 'post_weight': 70.1, 'pre_bp': '142/85', 'post_bp': '128/78',
             'access_condition': 'Good', 'notes': None},
        ],
    },
    {
        'name': 'Karim', 'familyname': 'Haddad', 'birthdate': '1978-11-03',
        'medications': [('Calcium carbonate', '1 g with meals')],
        'labs': [('Hemoglobin', '10.8 g/dL')],
        'sessions': [],
    },
    {
        'name': 'Louise', 'familyname': 'Martin', 'birthdate': '1949-02-27',
        'medications': [],
        'labs': [('Phosphate', '1.9 mmol/L')],
        'sessions': [
            {'pre_weight': 58.0, 'post_weight': 56.6, 'pre_bp': '150/90', 'post_bp': '135/80',
             'access_condition': 'Catheter', 'notes': 'Cramps in the last hour'},
        ],
    },
]


@click.command('init-db')
@with_appcontext
def init_db_command():
    """Create the Patients, Protocols, Medications, LabResults and Sessions tables."""
    db.create_all()
    click.echo("Database initialized successfully!")


@click.command('seed-demo')
@with_appcontext
def seed_demo_command():
    """Insert a few demo patients with their default protocol and records."""
    defaults = current_app.config['DEFAULT_PROTOCOL']

    for data in DEMO_PATIENTS:
        existing = Patient.query.filter_by(
            name=data['name'], familyname=data['familyname'], birthdate=data['birthdate']
        ).first()
        if existing:
            click.echo(f"Patient already exists: {data['name']} {data['familyname']}")
            continue

        patient = Patient(name=data['name'], familyname=data['familyname'], birthdate=data['birthdate'])
        patient.protocol = Protocol.from_defaults(defaults)
        records = (
            [Medication(patient=patient, name=name, dosage=dosage) for name, dosage in data['medications']]
            + [LabResult(patient=patient, name=name, result=result) for name, result in data['labs']]
            + [DialysisSession(patient=patient, **session) for session in data['sessions']]
        )

        db.session.add(patient)
        db.session.add_all(records)
        click.echo(f"Added patient: {data['name']} {data['familyname']}")

    db.session.commit()
    click.echo("Demo data seeded successfully!")


def _write(html, output):
    if output:
        with open(output, 'w', encoding='utf-8') as f:
            f.write(html)
        click.echo(f"Wrote {output}")
    else:
        click.echo(html)


def _client(api_base):
    from medprosana.client import ApiClient, ClinicClient
    config = current_app.config
    return ClinicClient(
        ApiClient(api_base or config['API_BASE'], timeout=config['CLIENT_TIMEOUT']),
        max_workers=config['CLIENT_MAX_WORKERS']
    )


@click.command('render-roster')
@click.option('--api-base', default=None, help='Base URL of the API, e.g. http://127.0.0.1:5000/api')
@click.option('--output', '-o', type=click.Path(dir_okay=False), default=None)
@with_appcontext
def render_roster_command(api_base, output):
    """Fetch the roster from a running API and render it as HTML."""
    from medprosana.client import render_page
    client = _client(api_base)
    client.load_roster()
    _write(render_page(client.state), output)


@click.command('render-patient')
@click.argument('patient_id', type=int)
@click.option('--tab', type=click.Choice(['info', 'sessions', 'meds', 'labs', 'protocol']), default='info')
@click.option('--api-base', default=None, help='Base URL of the API, e.g. http://127.0.0.1:5000/api')
@click.option('--output', '-o', type=click.Path(dir_okay=False), default=None)
@with_appcontext
def render_patient_command(patient_id, tab, api_base, output):
    """Fetch one patient's detail set from a running API and render a tab as HTML."""
    from medprosana.client import render_page
    client = _client(api_base)
    client.load_roster()
    client.open_patient(patient_id)
    client.select_tab(tab)
    _write(render_page(client.state), output)


def register_commands(app):
    app.cli.add_command(init_db_command)
    app.cli.add_command(seed_demo_command)
    app.cli.add_command(render_roster_command)
    app.cli.add_command(render_patient_command)
