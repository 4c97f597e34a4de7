import logging

from flask import (
    Blueprint,
    abort,
    current_app,
    make_response,
    redirect,
    render_template,
    request,
    url_for,
)
from icalendar import Calendar, Event as ICalEvent

from ...filtering import parse_fecha, parse_fecha_local
from ...models.event import CATEGORIAS, SortDirection
from ...notifications import DEACTIVATE_PROMPT

logger = logging.getLogger(__name__)

# Create the blueprint
events_bp = Blueprint('events', __name__)

SORT_LABELS = {
    SortDirection.ASC: 'Más Antigua a Más Reciente',
    SortDirection.DESC: 'Más Reciente a Más Antigua',
}

def get_controller():
    """Return the session controller, loading events on first use."""
    state = current_app.extensions['gestion_eventos']
    if not state['loaded']:
        with state['lock']:
            # Concurrent first requests wait for a single load
            if not state['loaded']:
                state['controller'].load_events()
                state['loaded'] = True
    return state['controller']

@events_bp.app_template_filter('fecha_corta')
def fecha_corta(value):
    """Format an event date as dd/mm/yyyy in its own offset, falling back to the raw value."""
    parsed = parse_fecha_local(value)
    if parsed is None:
        return value or ''
    return parsed.strftime('%d/%m/%Y')

@events_bp.app_template_filter('edit_url')
def edit_url(event_id):
    return current_app.config['EDIT_URL_TEMPLATE'].format(id=event_id)

@events_bp.route('/')
def index():
    """Render the event cards with the current filters."""
    controller = get_controller()
    
    if 'categoria' in request.args:
        controller.set_category_filter(request.args['categoria'])
    if 'nombre' in request.args:
        controller.set_name_query(request.args['nombre'])
    if 'orden' in request.args:
        try:
            controller.set_sort_direction(request.args['orden'])
        except ValueError:
            abort(400)
    
    filters = controller.filter_state
    return render_template(
        'index.html',
        events=controller.visible_events(),
        categorias=CATEGORIAS,
        filters=filters,
        sort_label=SORT_LABELS[filters.sort_direction]
    )

@events_bp.route('/ordenar', methods=['POST'])
def toggle_sort():
    get_controller().toggle_sort_direction()
    return redirect(url_for('events.index'))

@events_bp.route('/eventos/<event_id>/desactivar', methods=['GET'])
def confirm_deactivate(event_id):
    """Show the confirmation prompt for deactivating an event."""
    event = get_controller().store.get(event_id)
    if event is None:
        abort(404)
    return render_template('confirm.html', event=event, prompt=DEACTIVATE_PROMPT)

@events_bp.route('/eventos/<event_id>/desactivar', methods=['POST'])
def deactivate(event_id):
    """Deactivate an event if the prompt was confirmed."""
    controller = get_controller()
    confirmed = request.form.get('confirmar') == '1'
    controller.deactivate_event(event_id, confirm=lambda prompt: confirmed)
    return redirect(url_for('events.index'))

@events_bp.route('/calendar.ics')
def ics_feed():
    """Generate an iCalendar feed of the visible events."""
    events = get_controller().visible_events()
    
    # Create calendar
    cal = Calendar()
    cal.add('prodid', '-//Gestion Eventos//admin//')
    cal.add('version', '2.0')
    cal.add('x-wr-calname', 'Eventos')
    
    for event in events:
        start = parse_fecha(event.fecha)
        if start is None:
            continue
        
        cal_event = ICalEvent()
        cal_event.add('uid', f"evento-{event.id}@gestion-eventos")
        cal_event.add('summary', event.nombre or '')
        cal_event.add('dtstart', start)
        
        if event.descripcion:
            cal_event.add('description', event.descripcion)
            
        if event.categoria:
            cal_event.add('categories', [event.categoria])
            
        cal.add_component(cal_event)
    
    response = make_response(cal.to_ical())
    response.headers['Content-Type'] = 'text/calendar; charset=utf-8'
    response.headers['Content-Disposition'] = 'attachment; filename=eventos.ics'
    
    return response
