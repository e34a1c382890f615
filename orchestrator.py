"""
Form Recognizer Orchestrator
Runs the custom model walkthrough: train, list keys, analyze, list models, delete
"""

import asyncio
from typing import Any, Dict, Optional

from agents.form_analysis_agent import FormAnalysisAgent
from agents.file_validation_agent import FileValidationAgent
from agents.model_management_agent import ModelManagementAgent
from agents.model_training_agent import ModelTrainingAgent
from config.service_config import ServiceConfig
from config.yaml_config import YAMLConfigLoader
from services.form_recognizer_service import FormRecognizerService
from services.storage_service import StorageService
from utils.logger import get_logger, setup_logging

logger = get_logger(__name__)

ANALYZE_HEADINGS = {
    "pdf": "Analyze PDF form...",
    "jpg": "Analyze JPEG form...",
    "png": "Analyze PNG form..."
}


class FormRecognizerOrchestrator:
    """
    Coordinates the agents over one shared Form Recognizer client:
    1. Model Training Agent - trains the model and lists extracted keys
    2. Form Analysis Agent - analyzes the sample forms
    3. Model Management Agent - lists models and deletes the trained one
    """

    def __init__(
        self,
        form_recognizer: FormRecognizerService,
        config_loader: Optional[YAMLConfigLoader] = None,
        storage_service: Optional[StorageService] = None
    ):
        self.config_loader = config_loader or YAMLConfigLoader()
        self.form_recognizer = form_recognizer
        self.training_agent = ModelTrainingAgent(form_recognizer)
        self.analysis_agent = FormAnalysisAgent(
            form_recognizer,
            storage_service=storage_service,
            file_validator=FileValidationAgent(self.config_loader)
        )
        self.management_agent = ModelManagementAgent(form_recognizer)
        # Validated before any remote call
        self.analyze_kinds = self.config_loader.get_analyze_kinds()

    async def run_sample(self) -> Dict[str, Any]:
        """
        Run every step in order. A failed step is reported and the next one
        still runs, using the empty model id if training failed.
        """
        print("Train Model with training data...")
        model_id = await self.training_agent.train_model(
            self.config_loader.get_training_data_url(),
            self.config_loader.get_training_source_filter()
        )

        print("Get list of extracted keys...")
        keys = await self.training_agent.get_extracted_keys(model_id)

        analyses = {}
        for kind in self.analyze_kinds:
            print(ANALYZE_HEADINGS[kind])
            analyses[kind] = await self.analysis_agent.analyze_form(
                model_id,
                self.config_loader.get_form_file(kind),
                kind
            )

        print("Get list of trained models ...")
        models = await self.management_agent.list_models()

        print("Delete Model...")
        deleted = await self.management_agent.delete_model(model_id)

        return {
            "model_id": model_id,
            "keys": keys,
            "analyses": analyses,
            "models": models,
            "deleted": deleted
        }


async def run_form_recognizer_client(
    config_loader: Optional[YAMLConfigLoader] = None,
    service_config: Optional[ServiceConfig] = None
) -> Dict[str, Any]:
    """Create the authenticated client and run the walkthrough with it"""
    config_loader = config_loader or YAMLConfigLoader()
    service_config = service_config or ServiceConfig(config_loader=config_loader)

    async with FormRecognizerService(service_config) as form_recognizer:
        orchestrator = FormRecognizerOrchestrator(form_recognizer, config_loader=config_loader)
        return await orchestrator.run_sample()


def main() -> None:
    setup_logging()
    print("====== Service Started ======")
    asyncio.run(run_form_recognizer_client())


if __name__ == "__main__":
    main()
