from flask import Blueprint, jsonify

from config.app_config import AppConfig

health = Blueprint('health', __name__)


@health.route('/health-check', methods=['GET'])
def health_check():
  return jsonify({
    "status": "healthy",
    "env": AppConfig.APP_ENV,
    "model": AppConfig.PROMPT_MODEL,
    "llm_configured": bool(AppConfig.LLM_API_KEY)
  }), 200
