# embed.py
"""
Embeddable widgets.

Serves the two loader scripts third-party pages include, the inner frame
pages they point at, and a demo host page. The script bodies are rendered
from the same EmbedTarget objects the Python HostLoader uses, so container
ids, fallback heights and trusted origins cannot drift apart.

Integration snippet (form):
    <div id="platapay-agent-form-container"></div>
    <script src="https://<app>/embed.js"></script>
"""

from flask import Blueprint, Response, current_app, render_template, request
from platapay.widget import form_target, map_target, origin_of

bp = Blueprint('embed', __name__)

JAVASCRIPT_MIMETYPE = 'application/javascript'


def get_form_target():
    return form_target(
        current_app.config['EMBED_FORM_URL'],
        current_app.config.get('EMBED_FORM_ORIGIN'),
    )


def get_map_target():
    # The map is served next to its loader script
    return map_target(request.host_url)


def _loader_script(target):
    body = render_template('embed/loader.js', target=target)
    response = Response(body, mimetype=JAVASCRIPT_MIMETYPE)
    response.headers['Cache-Control'] = 'public, max-age=300'
    return response


@bp.route('/embed.js', methods=['GET'])
def form_loader_script():
    return _loader_script(get_form_target())


@bp.route('/embed-map.js', methods=['GET'])
def map_loader_script():
    return _loader_script(get_map_target())


@bp.route('/embed', methods=['GET'])
def form_frame():
    """Registration form without site chrome, for use inside the iframe."""
    return render_template('embed/form.html')


@bp.route('/embed/map', methods=['GET'])
def map_frame():
    """Agent map without site chrome, for use inside the iframe."""
    return render_template('embed/map.html')


@bp.route('/embed/map/demo', methods=['GET'])
def map_demo():
    """A host page that embeds the map exactly as an integrator would."""
    app_origin = origin_of(current_app.config['APP_URL']) or origin_of(request.host_url)
    return render_template(
        'embed/demo.html',
        target=get_map_target(),
        script_url=f"{app_origin}/embed-map.js",
    )
