import os

from bloodportal import create_app

if __name__ == '__main__':
    app = create_app()
    # No reloader: it would start a second scheduler in the child process
    app.run(host=os.getenv('HOST', '127.0.0.1'), port=int(os.getenv('PORT', '8000')), use_reloader=False)
