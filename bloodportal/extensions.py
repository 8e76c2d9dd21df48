from flask_apscheduler import APScheduler
from flask_cors import CORS

cors = CORS()
scheduler = APScheduler()
