"""Entry point per l'applicazione.

Questo script avvia l'app Flask e può inizializzare il database se
la variabile d'ambiente `INIT_DB` è impostata (es. INIT_DB=1).
Le variabili d'ambiente vengono lette dal file `.env`, se presente.
"""

import logging
import os

from dotenv import load_dotenv

# Va caricato prima di importare la configurazione
load_dotenv()

from finance_tracker import create_app  # noqa: E402
from finance_tracker.commands import init_database  # noqa: E402

app = create_app(os.environ.get('FINANCE_TRACKER_CONFIG', 'default'))


def main():
    logging.basicConfig(
        level=app.config.get('LOG_LEVEL', 'INFO'),
        format='%(asctime)s %(levelname)s %(name)s: %(message)s',
    )

    # Optional DB init (usare solo in fase di provisioning)
    if os.environ.get('INIT_DB') == '1':
        with app.app_context():
            created = init_database()
            app.logger.info('Database initialized (%d categories added)', created)

    app.logger.info('The server is listening on port %s', app.config['PORT'])
    app.run(host=app.config.get('HOST', '0.0.0.0'), port=app.config.get('PORT', 3000))


if __name__ == '__main__':
    main()
