"""
Parameter definitions for the Streak node.

Every entry is a plain dict in the host's property format; the registry
validates them against node_sdk.NodeParameter at registration time.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Sequence


def _show(resource: str, operations: Optional[Sequence[str]] = None) -> Dict[str, Any]:
    show: Dict[str, Any] = {"resource": [resource]}
    if operations:
        show["operation"] = list(operations)
    return {"show": show}


def _operation(resource: str, default: str, options: List[Dict[str, str]]) -> Dict[str, Any]:
    return {
        "displayName": "Operation",
        "name": "operation",
        "type": "options",
        "noDataExpression": True,
        "default": default,
        "options": options,
        "displayOptions": _show(resource),
    }


def _op(name: str, value: str, action: str) -> Dict[str, str]:
    return {"name": name, "value": value, "action": action}


def _locator(
    name: str,
    display_name: str,
    search_method: str,
    resource: str,
    operations: Sequence[str],
    required: bool = True,
) -> Dict[str, Any]:
    """A key parameter that can be picked from a searchable list or typed as an ID."""
    return {
        "displayName": display_name,
        "name": name,
        "type": "resourceLocator",
        "default": {"mode": "list", "value": ""},
        "required": required,
        "modes": [
            {
                "displayName": "From List",
                "name": "list",
                "type": "list",
                "typeOptions": {"searchListMethod": search_method, "searchable": True},
            },
            {"displayName": "By ID", "name": "id", "type": "string"},
        ],
        "displayOptions": _show(resource, operations),
    }


def _string(
    name: str,
    display_name: str,
    resource: str,
    operations: Sequence[str],
    required: bool = True,
    description: Optional[str] = None,
) -> Dict[str, Any]:
    param: Dict[str, Any] = {
        "displayName": display_name,
        "name": name,
        "type": "string",
        "default": "",
        "required": required,
        "displayOptions": _show(resource, operations),
    }
    if description:
        param["description"] = description
    return param


def _collection(
    name: str,
    display_name: str,
    resource: str,
    operations: Sequence[str],
    options: List[Dict[str, Any]],
) -> Dict[str, Any]:
    return {
        "displayName": display_name,
        "name": name,
        "type": "collection",
        "placeholder": "Add Field",
        "default": {},
        "displayOptions": _show(resource, operations),
        "options": options,
    }


def _field(name: str, display_name: str, type_: str = "string", default: Any = "", **extra: Any) -> Dict[str, Any]:
    return {"displayName": display_name, "name": name, "type": type_, "default": default, **extra}


def _pagination(resource: str, operations: Sequence[str]) -> List[Dict[str, Any]]:
    return [
        {
            "displayName": "Return All",
            "name": "returnAll",
            "type": "boolean",
            "default": False,
            "description": "Whether to return all results or only up to a given limit",
            "displayOptions": _show(resource, operations),
        },
        {
            "displayName": "Limit",
            "name": "limit",
            "type": "number",
            "default": 50,
            "typeOptions": {"minValue": 1},
            "description": "Max number of results to return",
            "displayOptions": {
                "show": {"resource": [resource], "operation": list(operations), "returnAll": [False]}
            },
        },
    ]


RESOURCE = {
    "displayName": "Resource",
    "name": "resource",
    "type": "options",
    "noDataExpression": True,
    "default": "pipeline",
    "options": [
        {"name": "Box", "value": "box"},
        {"name": "Contact", "value": "contact"},
        {"name": "Field", "value": "field"},
        {"name": "Organization", "value": "organization"},
        {"name": "Pipeline", "value": "pipeline"},
        {"name": "Stage", "value": "stage"},
        {"name": "Task", "value": "task"},
        {"name": "Team", "value": "team"},
        {"name": "User", "value": "user"},
    ],
}


USER = [
    _operation("user", "getCurrentUser", [
        _op("Get Current User", "getCurrentUser", "Get the current user"),
        _op("Get User", "getUser", "Get a user"),
    ]),
    _string("userKey", "User Key", "user", ["getUser"]),
]


TEAM = [
    _operation("team", "getMyTeams", [
        _op("Get My Teams", "getMyTeams", "Get the teams of the current user"),
        _op("Get Team", "getTeam", "Get a team"),
    ]),
    {
        "displayName": "Team Key",
        "name": "teamKey",
        "type": "options",
        "typeOptions": {"loadOptionsMethod": "getTeamOptions"},
        "default": "",
        "required": True,
        "displayOptions": _show("team", ["getTeam"]),
    },
]


PIPELINE_KEY_OPS = ["getPipeline", "updatePipeline", "deletePipeline", "moveBoxesBatch"]

PIPELINE = [
    _operation("pipeline", "listAllPipelines", [
        _op("Create Pipeline", "createPipeline", "Create a pipeline"),
        _op("Delete Pipeline", "deletePipeline", "Delete a pipeline"),
        _op("Get Pipeline", "getPipeline", "Get a pipeline"),
        _op("List All Pipelines", "listAllPipelines", "List all pipelines"),
        _op("Move Boxes (Batch)", "moveBoxesBatch", "Move boxes to another pipeline"),
        _op("Update Pipeline", "updatePipeline", "Update a pipeline"),
    ]),
    _locator("pipelineKey", "Pipeline", "getPipelineOptions", "pipeline", PIPELINE_KEY_OPS),
    _string("pipelineName", "Pipeline Name", "pipeline", ["createPipeline", "updatePipeline"]),
    {
        "displayName": "Team Key",
        "name": "teamKey",
        "type": "options",
        "typeOptions": {"loadOptionsMethod": "getTeamOptions"},
        "default": "",
        "displayOptions": _show("pipeline", ["createPipeline"]),
    },
    _collection("additionalFields", "Additional Fields", "pipeline", ["createPipeline"], [
        _field("stageNames", "Stage Names", description="Comma separated stage names"),
        _field("teamWide", "Team Wide", "boolean", False),
        _field("fieldNames", "Field Names", description="Comma separated field names"),
        _field("fieldTypes", "Field Types", description="Comma separated field types"),
    ]),
    _collection("updateFields", "Update Fields", "pipeline", ["updatePipeline"], [
        _field("description", "Description"),
        _field("orgWide", "Organization Wide", "boolean", False),
    ]),
    _string(
        "boxKeys", "Box Keys", "pipeline", ["moveBoxesBatch"],
        description="Comma separated keys of the boxes to move",
    ),
    _locator("targetPipelineKey", "Target Pipeline", "getPipelineOptions", "pipeline", ["moveBoxesBatch"]),
    *_pagination("pipeline", ["listAllPipelines"]),
]


BOX_KEY_OPS = ["getBox", "updateBox", "deleteBox", "getTimeline"]
BOX_FIELD_OPTIONS = [
    _field("notes", "Notes"),
    _field("assignedToTeamKeyOrUserKey", "Assigned To (Team or User Key)"),
]

BOX = [
    _operation("box", "listBoxes", [
        _op("Create Box", "createBox", "Create a box"),
        _op("Delete Box", "deleteBox", "Delete a box"),
        _op("Get Box", "getBox", "Get a box"),
        _op("Get Multiple Boxes", "getMultipleBoxes", "Get several boxes by key"),
        _op("Get Timeline", "getTimeline", "Get the timeline of a box"),
        _op("List Boxes in Pipeline", "listBoxes", "List the boxes of a pipeline"),
        _op("Search Boxes", "searchBoxes", "Search boxes"),
        _op("Update Box", "updateBox", "Update a box"),
    ]),
    _locator("pipelineKey", "Pipeline", "getPipelineOptions", "box", ["listBoxes", "createBox"]),
    _locator(
        "pipelineKey", "Pipeline", "getPipelineOptions", "box", ["searchBoxes"], required=False,
    ),
    _locator("boxKey", "Box", "getBoxOptions", "box", BOX_KEY_OPS),
    _string(
        "boxKeys", "Box Keys", "box", ["getMultipleBoxes"],
        description="Comma separated keys of the boxes to fetch",
    ),
    _locator(
        "stageKeyFilter", "Stage", "getStageOptions", "box", ["listBoxes", "searchBoxes"], required=False,
    ),
    _string("searchQuery", "Search Query", "box", ["searchBoxes"]),
    _string("boxName", "Box Name", "box", ["createBox"]),
    _locator("stageKey", "Stage", "getStageOptions", "box", ["createBox"], required=False),
    _collection("additionalFields", "Additional Fields", "box", ["createBox"], BOX_FIELD_OPTIONS),
    _collection("updateFields", "Update Fields", "box", ["updateBox"], [
        _field("name", "Name"),
        _field("stageKey", "Stage Key"),
        *BOX_FIELD_OPTIONS,
    ]),
    *_pagination("box", ["listBoxes", "getTimeline"]),
]


STAGE_KEY_OPS = ["getStage", "updateStage", "deleteStage"]

STAGE = [
    _operation("stage", "listStages", [
        _op("Create Stage", "createStage", "Create a stage"),
        _op("Delete Stage", "deleteStage", "Delete a stage"),
        _op("Get Stage", "getStage", "Get a stage"),
        _op("List Stages", "listStages", "List the stages of a pipeline"),
        _op("Update Stage", "updateStage", "Update a stage"),
    ]),
    _locator(
        "pipelineKey", "Pipeline", "getPipelineOptions", "stage", ["listStages", "createStage", *STAGE_KEY_OPS],
    ),
    _locator("stageKey", "Stage", "getStageOptions", "stage", STAGE_KEY_OPS),
    _string("stageName", "Stage Name", "stage", ["createStage"]),
    _collection("additionalFields", "Additional Fields", "stage", ["createStage"], [
        _field("color", "Color", "color"),
    ]),
    _collection("updateFields", "Update Fields", "stage", ["updateStage"], [
        _field("name", "Name"),
        _field("color", "Color", "color"),
    ]),
]


FIELD_DEFINITION_OPS = ["listFields", "getField", "createField", "updateField", "deleteField"]
FIELD_VALUE_OPS = ["listFieldValues", "getFieldValue", "updateFieldValue"]

FIELD = [
    _operation("field", "listFields", [
        _op("Create Field", "createField", "Create a field"),
        _op("Delete Field", "deleteField", "Delete a field"),
        _op("Get Field", "getField", "Get a field"),
        _op("Get Field Value", "getFieldValue", "Get the value of a field on a box"),
        _op("List Field Values", "listFieldValues", "List the field values of a box"),
        _op("List Fields", "listFields", "List the fields of a pipeline"),
        _op("Update Field", "updateField", "Update a field"),
        _op("Update Field Value", "updateFieldValue", "Set the value of a field on a box"),
    ]),
    _locator("pipelineKey", "Pipeline", "getPipelineOptions", "field", FIELD_DEFINITION_OPS),
    _locator("boxKey", "Box", "getBoxOptions", "field", FIELD_VALUE_OPS),
    _string(
        "fieldKey", "Field Key", "field",
        ["getField", "updateField", "deleteField", "getFieldValue", "updateFieldValue"],
    ),
    _string("fieldName", "Field Name", "field", ["createField"]),
    {
        "displayName": "Field Type",
        "name": "fieldType",
        "type": "options",
        "default": "TEXT_INPUT",
        "required": True,
        "options": [
            {"name": "Checkbox", "value": "CHECKBOX"},
            {"name": "Date", "value": "DATE"},
            {"name": "Dropdown", "value": "DROPDOWN"},
            {"name": "Person", "value": "PERSON"},
            {"name": "Tag", "value": "TAG"},
            {"name": "Text Input", "value": "TEXT_INPUT"},
        ],
        "displayOptions": _show("field", ["createField"]),
    },
    _collection("additionalFields", "Additional Fields", "field", ["createField"], [
        _field("description", "Description"),
        _field("keyName", "Key Name"),
        _field("enumValues", "Dropdown Values", description="Comma separated values for DROPDOWN fields"),
    ]),
    _collection("updateFields", "Update Fields", "field", ["updateField"], [
        _field("name", "Name"),
        _field("description", "Description"),
        _field("keyName", "Key Name"),
    ]),
    _string("fieldValue", "Value", "field", ["updateFieldValue"], required=False),
]


CONTACT_FIELD_OPTIONS = [
    _field("firstName", "First Name"),
    _field("lastName", "Last Name"),
    _field("fullName", "Full Name"),
    _field("phones", "Phones", description="Comma separated phone numbers"),
    _field("organization", "Organization"),
    _field("title", "Title"),
]

CONTACT = [
    _operation("contact", "getContact", [
        _op("Create Contact", "createContact", "Create a contact"),
        _op("Delete Contact", "deleteContact", "Delete a contact"),
        _op("Get Contact", "getContact", "Get a contact"),
        _op("Update Contact", "updateContact", "Update a contact"),
    ]),
    _string("contactKey", "Contact Key", "contact", ["getContact", "updateContact", "deleteContact"]),
    {
        "displayName": "Team Key",
        "name": "teamKey",
        "type": "options",
        "typeOptions": {"loadOptionsMethod": "getTeamOptions"},
        "default": "",
        "required": True,
        "displayOptions": _show("contact", ["createContact"]),
    },
    _string("email", "Email", "contact", ["createContact"]),
    _collection("additionalFields", "Additional Fields", "contact", ["createContact"], CONTACT_FIELD_OPTIONS),
    _collection("updateFields", "Update Fields", "contact", ["updateContact"], [
        _field("email", "Email"),
        *CONTACT_FIELD_OPTIONS,
    ]),
]


ORGANIZATION_FIELD_OPTIONS = [
    _field("addresses", "Addresses"),
    _field("domains", "Domains", description="Comma separated domains"),
    _field("employeeCount", "Employee Count", "number", 0),
    _field("facebookHandle", "Facebook Handle"),
    _field("industry", "Industry"),
    _field("linkedInHandle", "LinkedIn Handle"),
    _field("logoUrl", "Logo URL"),
    _field("other", "Other"),
    _field("phoneNumbers", "Phone Numbers", description="Comma separated phone numbers"),
    _field("relationships", "Relationships"),
    _field("twitterHandle", "Twitter Handle"),
]

ORGANIZATION = [
    _operation("organization", "getOrganization", [
        _op("Check Existing Organizations", "checkExistingOrganizations", "Find matching organizations"),
        _op("Create Organization", "createOrganization", "Create an organization"),
        _op("Delete Organization", "deleteOrganization", "Delete an organization"),
        _op("Get Organization", "getOrganization", "Get an organization"),
        _op("Update Organization", "updateOrganization", "Update an organization"),
    ]),
    {
        "displayName": "Team Key",
        "name": "teamKey",
        "type": "options",
        "typeOptions": {"loadOptionsMethod": "getTeamOptions"},
        "default": "",
        "required": True,
        "displayOptions": _show("organization", ["createOrganization", "checkExistingOrganizations"]),
    },
    _string(
        "organizationKey", "Organization Key", "organization",
        ["getOrganization", "updateOrganization", "deleteOrganization"],
    ),
    _string("name", "Name", "organization", ["createOrganization"]),
    _collection("checkFields", "Check Fields", "organization", ["checkExistingOrganizations"], [
        _field("domain", "Domain"),
        _field("name", "Name"),
    ]),
    _collection(
        "additionalFields", "Additional Fields", "organization", ["createOrganization"],
        ORGANIZATION_FIELD_OPTIONS,
    ),
    _collection("updateFields", "Update Fields", "organization", ["updateOrganization"], [
        _field("name", "Name"),
        *ORGANIZATION_FIELD_OPTIONS,
    ]),
]


TASK_FIELD_OPTIONS = [
    _field("dueDate", "Due Date", "dateTime"),
    _field("assignees", "Assignees", description="Comma separated emails of the assignees"),
]

TASK = [
    _operation("task", "getTasksInBox", [
        _op("Create Task in a Box", "createTask", "Create a task in a box"),
        _op("Delete Task", "deleteTask", "Delete a task"),
        _op("Get Task", "getTask", "Get a task"),
        _op("Get Tasks in a Box", "getTasksInBox", "Get the tasks of a box"),
        _op("Update Task", "updateTask", "Update a task"),
    ]),
    _string("taskKey", "Task Key", "task", ["getTask", "updateTask", "deleteTask"]),
    _locator(
        "pipelineKey", "Pipeline", "getPipelineOptions", "task", ["getTasksInBox", "createTask"],
        required=False,
    ),
    _locator("boxKey", "Box", "getBoxOptions", "task", ["getTasksInBox", "createTask"]),
    _string("text", "Text", "task", ["createTask"]),
    _collection("additionalFields", "Additional Fields", "task", ["createTask"], TASK_FIELD_OPTIONS),
    _collection("updateFields", "Update Fields", "task", ["updateTask"], [
        _field("text", "Text"),
        _field("completed", "Completed", "boolean", False),
        *TASK_FIELD_OPTIONS,
    ]),
    *_pagination("task", ["getTasksInBox"]),
]


PARAMETERS: List[Dict[str, Any]] = [
    RESOURCE,
    *USER,
    *TEAM,
    *PIPELINE,
    *BOX,
    *STAGE,
    *FIELD,
    *CONTACT,
    *ORGANIZATION,
    *TASK,
]
