"""Blueprint principale per le route di base"""
from flask import Blueprint, render_template

from finance_tracker.utils.access import public

main_bp = Blueprint('main', __name__)


@main_bp.route('/')
@public
def index():
    """Landing page pubblica"""
    return render_template('index.html')


@main_bp.route('/health')
@public
def health():
    """Liveness probe"""
    return 'OK', 200, {'Content-Type': 'text/plain; charset=utf-8'}
