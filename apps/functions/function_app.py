"""Azure Functions App - Python v2 Programming Model.

Hosts the deployment smoke test: a stateless HTTP trigger that proves a
deployment is reachable. It reads no input and touches no state.
"""

import logging

import azure.functions as func

WELCOME_MESSAGE = "Welcome to Azure Functions!"

# Create the function app instance
app = func.FunctionApp(http_auth_level=func.AuthLevel.FUNCTION)


@app.function_name(name="EnkelTriggerForDeploy")
@app.route(route="EnkelTriggerForDeploy", methods=["GET", "POST"])
def enkel_trigger_for_deploy(req: func.HttpRequest) -> func.HttpResponse:
    """Post-deployment liveness probe.

    Example:
        GET /api/EnkelTriggerForDeploy

    Args:
        req: The HTTP request object (not consulted)

    Returns:
        HTTP 200 response with the welcome text
    """
    logging.info("Python HTTP trigger function processed a request.")

    return func.HttpResponse(
        WELCOME_MESSAGE,
        status_code=200,
        mimetype="text/plain",
    )
