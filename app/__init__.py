import datetime
import logging
import sys

import pytz
from flask import Flask
from dotenv import load_dotenv

from app.common.exception.error_handler import register_error_handlers
from app.blueprints.contract import contract_blueprint
from app.blueprints.common import healthcheck_blueprint
from config.app_config import AppConfig

load_dotenv()

class TimezoneFormatter(logging.Formatter):
  def formatTime(self, record, datefmt = None):
    dt = datetime.datetime.fromtimestamp(record.created,
                                         pytz.timezone(AppConfig.LOG_TIMEZONE))
    return dt.strftime(datefmt or "%Y-%m-%d %H:%M:%S")

def configure_logging():
  handler = logging.StreamHandler(sys.stdout)
  handler.setFormatter(TimezoneFormatter(
      fmt="%(asctime)s - %(levelname)s - %(filename)s:%(lineno)d - %(message)s",
      datefmt="%Y-%m-%d %H:%M:%S"
  ))

  logging.basicConfig(
      level=logging.INFO,
      handlers=[handler],
      force=True
  )
  logging.getLogger('werkzeug').disabled = True


def create_app():
  configure_logging()

  app = Flask(__name__)

  app.config["APP_ENV"] = AppConfig.APP_ENV
  # werkzeug rejects larger bodies before the form is parsed
  app.config["MAX_CONTENT_LENGTH"] = AppConfig.MAX_UPLOAD_BYTES

  # error handlers
  register_error_handlers(app)

  # blueprints
  app.register_blueprint(healthcheck_blueprint.health)
  app.register_blueprint(contract_blueprint.contracts)

  return app
