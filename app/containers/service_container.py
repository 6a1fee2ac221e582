from app.clients.openai_clients import prompt_deployment_name
from app.services.common.prompt_service import PromptService


prompt_service = PromptService(prompt_deployment_name)
