import psutil


def get_hardware_usage(context_message: str = "") -> str:
    """
    Retrieves current hardware usage (CPU, Memory) of the host and of the
    running pipeline process as a formatted string.

    Args:
        context_message (str, optional): A message to prepend to the usage string. Defaults to "".

    Returns:
        str: A formatted string detailing current hardware usage.
    """
    try:
        cpu = psutil.cpu_percent(interval=0.1)
        mem = psutil.virtual_memory()
        rss = psutil.Process().memory_info().rss

        usage_str = (
            f"CPU: {cpu:5.1f}% | "
            f"Memory: {mem.percent:5.1f}% ({mem.used/1024**3:.2f}/{mem.total/1024**3:.2f} GB) | "
            f"Process RSS: {rss/1024**2:.1f} MB"
        )
    except (psutil.Error, OSError) as e:
        usage_str = f"Error fetching hardware usage: {e}"

    if context_message:
        return f"{context_message} - {usage_str}"
    return usage_str
