# pastebininit/handlers/output_handler.py

import json
import sys

RULE = "=" * 70


def format_success_message(result):
    """Builds the detailed report for an uploaded paste."""
    message = f"\n{RULE}\n"
    message += "✓ PASTE UPLOADED SUCCESSFULLY!\n"
    message += f"{RULE}\n\n"
    message += "Paste Details:\n"
    message += f"   ├─ Name:          {result.paste_name}\n"
    message += f"   ├─ Key:           {result.paste_key}\n"
    message += f"   ├─ Size:          {result.size_bytes} bytes\n"
    message += f"   ├─ Format:        {result.paste_format}\n"
    message += f"   ├─ Privacy:       {result.paste_privacy}\n"
    message += f"   ├─ Expiration:    {result.paste_expiration}\n"
    message += f"   └─ Authenticated: {result.authenticated}\n\n"
    message += "URLs:\n"
    message += f"   ├─ Paste URL:     {result.paste_url}\n"
    message += f"   └─ Raw URL:       {result.raw_url}\n\n"
    message += "Performance:\n"
    message += f"   ├─ Status Code:   {result.status_code}\n"
    message += f"   ├─ Duration:      {result.duration_seconds:.3f} seconds\n"
    message += f"   └─ Timestamp:     {result.timestamp.isoformat()}\n"
    message += f"\n{RULE}\n"
    return message


def troubleshooting_hints(result):
    error = result.error.lower()
    if "invalid api_dev_key" in error:
        return [
            "Invalid API key",
            "Get your key from: https://pastebin.com/doc_api",
            "Make sure you copy the entire key without extra spaces",
        ]
    if "invalid api_user_key" in error or "private" in error:
        return [
            "Private pastes need a logged-in user",
            "Pass --username and --password (or set PASTEBIN_USERNAME / PASTEBIN_PASSWORD)",
        ]
    if result.status_code == 422:
        return [
            "HTTP 422: Invalid request",
            "Check that the content is not empty",
            "Verify API key is valid",
        ]
    if result.error_type == "transport":
        return [
            "Check your internet connection",
            "Verify Pastebin API is accessible",
            "Try a longer --timeout",
        ]
    return [
        "Check your API key validity",
        "Verify the format, privacy and expiration values",
    ]


def format_error_message(result):
    """Builds the detailed report for a failed upload."""
    status = result.status_code if result.status_code is not None else "N/A"
    message = f"\n{RULE}\n"
    message += "✗ UPLOAD FAILED\n"
    message += f"{RULE}\n\n"
    message += "Error Details:\n"
    message += f"   ├─ Error:         {result.error}\n"
    message += f"   ├─ Type:          {result.error_type}\n"
    message += f"   ├─ Status Code:   {status}\n"
    message += f"   ├─ Duration:      {result.duration_seconds:.3f} seconds\n"
    message += f"   └─ Timestamp:     {result.timestamp.isoformat()}\n\n"
    message += "Troubleshooting:\n"
    for hint in troubleshooting_hints(result):
        message += f"   • {hint}\n"
    message += f"\n{RULE}\n"
    return message


def render_json(result):
    return json.dumps(result.model_dump(mode="json"), indent=2)


def render_result(result, mode="plain", out=None, err=None):
    """Writes the result in the requested mode and returns the process exit code."""
    out = out or sys.stdout
    err = err or sys.stderr

    if mode == "json":
        print(render_json(result), file=out)
    elif mode == "quiet":
        if result.success:
            print(result.paste_url, file=out)
        else:
            print(f"✗ Upload failed: {result.error}", file=err)
    elif result.success:
        print(format_success_message(result), file=out)
    else:
        print(format_error_message(result), file=out)

    return 0 if result.success else 1
