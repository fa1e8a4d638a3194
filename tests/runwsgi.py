# Run a WSGI application in a daemon thread

import threading

import bottle

from . import localhost, util


class Server(bottle.WSGIRefServer):
    def run(self, handler): # pragma: no cover
        from wsgiref.simple_server import make_server, WSGIRequestHandler

        class QuietHandler(WSGIRequestHandler):
            def log_request(*args, **kw): pass

        self.options['handler_class'] = QuietHandler
        self.srv = make_server(self.host, self.port, handler, **self.options)
        self.srv.serve_forever(poll_interval=0.1)


class ServerThread(threading.Thread):
    def __init__(self, app, port):
        threading.Thread.__init__(self)
        self.daemon = True
        self.app = app
        self.server = Server(host=localhost, port=port)

    def run(self):
        bottle.run(self.app, server=self.server, quiet=True)


# port -> app, shared by all test modules of a run
started_servers = {}


def start_server(app, port):
    thread = ServerThread(app, port)
    thread.start()
    if not util.wait_listening(localhost, port, timeout=5.0):
        raise RuntimeError('App did not start listening on %s:%d' % (localhost, port))
    return thread.server


def app_runner_setup(*specs):
    '''Returns setup and teardown functions for running a list of WSGI
    applications in daemon threads.

    Each argument is an (app, port) pair.  The functions expect to be
    called with an object on which server state is stored, which makes
    them usable as setup_module/teardown_module:

    >>> setup_module, teardown_module = \
        runwsgi.app_runner_setup((app_module.app, 8390))
    '''

    def setup(self):
        self.servers = []
        for app, port in specs:
            if port in started_servers:
                assert started_servers[port] is app
                continue
            self.servers.append(start_server(app, port))
            started_servers[port] = app

    def teardown(self):
        # servers stay up for later modules; daemon threads die with the run
        pass

    return [setup, teardown]
