#!/usr/bin/env python3
"""
Control Flow Transcript Checker

Runs the control-flow example programs and verifies that each one prints
exactly the transcript its fixed logic implies. Programs can be executed
locally in a subprocess or submitted to a CodeRunner server over socket.io.
Generates JSON and HTML reports.

Usage:
    python flow_check.py [--program NAME] [--backend local|remote] [--server URL]
                         [--repeat N] [--concurrency N] [--output DIR]
"""

import argparse
import asyncio
import html
import json
import os
import re
import sys
import time
import uuid
from dataclasses import dataclass, field, asdict
from datetime import datetime
from typing import Optional, Union

import socketio
from socketio import exceptions as sio_exceptions


PROGRAMS_DIR = os.path.join(os.path.dirname(os.path.abspath(__file__)), "programs", "python")

SEPARATOR = ["", "--- Next Example ---", ""]

ExpectedLine = Union[str, re.Pattern]


# =============================================================================
# Program Catalog
# =============================================================================


def with_separators(*sections: list) -> list:
    """Join transcript sections with the blank-padded separator banner"""
    lines = []
    for index, section in enumerate(sections):
        if index:
            lines.extend(SEPARATOR)
        lines.extend(section)
    return lines


FOR_LOOPS_TRANSCRIPT = with_separators(
    [f"Count: {i}" for i in range(1, 6)],
    [f"Reverse count: {i}" for i in range(5, 0, -1)],
    [f"Element at index {i}: {v}" for i, v in enumerate([2, 4, 6, 8, 10])],
    ["* " * row for row in range(1, 6)],
    # Iteration count depends on machine speed
    [re.compile(r"Count reached: [1-9]\d*")],
    [f"i = {i}, j = {j}" for i, j in zip(range(1, 6), range(10, 5, -1))],
)

IF_STATEMENTS_TRANSCRIPT = with_separators(
    ["Number is positive"],
    ["You are an adult"],
    ["Grade: C"],
    ["You can drive"],
    ["No work today!"],
    ["The maximum value is: 10"],
    ["Wednesday"],
)

PROGRAMS = [
    {
        "name": "for_loops",
        "path": os.path.join(PROGRAMS_DIR, "01_for_loops.py"),
        "category": "loops",
        "expected": FOR_LOOPS_TRANSCRIPT,
    },
    {
        "name": "if_statements",
        "path": os.path.join(PROGRAMS_DIR, "02_if_statements.py"),
        "category": "conditionals",
        "expected": IF_STATEMENTS_TRANSCRIPT,
    },
]


def find_programs(names: Optional[list] = None) -> list[dict]:
    """Select catalog entries by name, keeping catalog order"""
    if not names:
        return list(PROGRAMS)
    known = {p["name"] for p in PROGRAMS}
    unknown = [n for n in names if n not in known]
    if unknown:
        raise KeyError(f"Unknown program(s): {', '.join(unknown)}")
    return [p for p in PROGRAMS if p["name"] in names]


# =============================================================================
# Data Classes
# =============================================================================


@dataclass
class Mismatch:
    """A single transcript line that differs from the expected output"""

    line: int
    expected: Optional[str]
    actual: Optional[str]


@dataclass
class ExecutionResult:
    """Result of a single program execution"""

    worker_id: str
    session_id: str
    backend: str
    program_name: str
    category: str
    success: bool
    start_time: float
    end_time: float
    execution_time_ms: float
    exit_code: Optional[int] = None
    stdout: str = ""
    stderr: str = ""
    error: Optional[str] = None
    mismatches: list = field(default_factory=list)


@dataclass
class CheckReport:
    """Complete transcript check report"""

    check_id: str
    start_time: str
    end_time: str
    duration_seconds: float
    backend: str
    server_url: Optional[str]
    repeat: int
    concurrency: int
    total_executions: int = 0
    passed_executions: int = 0
    failed_executions: int = 0
    avg_execution_time_ms: float = 0.0
    min_execution_time_ms: float = 0.0
    max_execution_time_ms: float = 0.0
    executions_by_program: dict = field(default_factory=dict)
    executions_by_category: dict = field(default_factory=dict)
    execution_results: list = field(default_factory=list)


# =============================================================================
# Transcript Matching
# =============================================================================


def _describe(expected: Optional[ExpectedLine]) -> Optional[str]:
    if isinstance(expected, re.Pattern):
        return f"/{expected.pattern}/"
    return expected


def _line_matches(expected: Optional[ExpectedLine], actual: Optional[str]) -> bool:
    if expected is None or actual is None:
        return False
    if isinstance(expected, re.Pattern):
        return expected.fullmatch(actual) is not None
    return expected == actual


def match_transcript(expected: list, stdout: str) -> list[Mismatch]:
    """Compare stdout line by line against the expected transcript.

    Expected entries are either literal lines or compiled patterns that must
    match the whole line. Only "\n" and "\r\n" end a line, and trailing
    whitespace is significant. Missing and
    extra lines are reported with ``None`` on the absent side.
    """
    actual = stdout.replace("\r\n", "\n").split("\n")
    if actual[-1] == "":
        actual.pop()
    mismatches = []
    for index in range(max(len(expected), len(actual))):
        want = expected[index] if index < len(expected) else None
        got = actual[index] if index < len(actual) else None
        if not _line_matches(want, got):
            mismatches.append(Mismatch(line=index + 1, expected=_describe(want), actual=got))
    return mismatches


def evaluate(result: ExecutionResult, program: dict) -> ExecutionResult:
    """Fill in mismatches and the final verdict for a finished execution"""
    if result.error is None:
        result.mismatches = [asdict(m) for m in match_transcript(program["expected"], result.stdout)]
    result.success = (
        result.error is None and result.exit_code == 0 and not result.mismatches
    )
    return result


# =============================================================================
# Executors
# =============================================================================


class LocalExecutor:
    """Runs programs in a subprocess of the current interpreter"""

    backend = "local"

    def __init__(self, worker_id: str, interpreter: str = sys.executable):
        self.worker_id = worker_id
        self.interpreter = interpreter
        self.session_id = f"flowcheck-{worker_id}-{uuid.uuid4().hex[:8]}"
        self.connected = False

    async def connect(self) -> bool:
        self.connected = True
        return True

    async def disconnect(self):
        self.connected = False

    async def run_program(self, program: dict, timeout: float = 30.0) -> ExecutionResult:
        """Run a single program"""
        result = ExecutionResult(
            worker_id=self.worker_id,
            session_id=self.session_id,
            backend=self.backend,
            program_name=program["name"],
            category=program.get("category", "unknown"),
            success=False,
            start_time=time.time(),
            end_time=0,
            execution_time_ms=0,
        )

        try:
            process = await asyncio.create_subprocess_exec(
                self.interpreter,
                program["path"],
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
            )
            try:
                stdout, stderr = await asyncio.wait_for(process.communicate(), timeout=timeout)
            except asyncio.TimeoutError:
                process.kill()
                await process.wait()
                result.error = "Execution timeout"
            else:
                result.exit_code = process.returncode
                result.stdout = stdout.decode("utf-8", errors="replace")
                result.stderr = stderr.decode("utf-8", errors="replace")
        except OSError as e:
            result.error = str(e)

        result.end_time = time.time()
        result.execution_time_ms = (result.end_time - result.start_time) * 1000
        return result


class RemoteExecutor:
    """Submits programs to a CodeRunner server over socket.io"""

    backend = "remote"

    def __init__(self, worker_id: str, server_url: str):
        self.worker_id = worker_id
        self.server_url = server_url
        self.session_id = self._new_session_id()
        self.sio: Optional[socketio.AsyncClient] = None
        self._output_buffer = ""
        self._execution_complete = asyncio.Event()
        self._current_result: Optional[ExecutionResult] = None

    def _new_session_id(self) -> str:
        return f"flowcheck-{self.worker_id}-{uuid.uuid4().hex[:8]}"

    @property
    def connected(self) -> bool:
        return bool(self.sio and self.sio.connected)

    def _accepts(self, client, data) -> bool:
        """Only events from the live client for the current run count"""
        if client is not self.sio or self._current_result is None:
            return False
        if isinstance(data, dict) and "sessionId" in data:
            return data["sessionId"] == self.session_id
        return True

    def _finish(self, exit_code: int, execution_time_ms: float):
        self._current_result.end_time = time.time()
        self._current_result.execution_time_ms = execution_time_ms
        self._current_result.exit_code = exit_code
        self._current_result.stdout = self._output_buffer
        self._execution_complete.set()

    async def connect(self) -> bool:
        """Connect to the CodeRunner server"""
        try:
            client = socketio.AsyncClient()
            self.sio = client

            @client.on("output")
            async def on_output(data):
                if self._accepts(client, data):
                    self._output_buffer += data.get("data", "")

            @client.on("exit")
            async def on_exit(data):
                if self._accepts(client, data):
                    self._finish(data.get("code", -1), data.get("executionTime", 0))

            @client.on("execution-complete")
            async def on_complete(data):
                if self._accepts(client, data):
                    self._finish(data.get("exitCode", -1), data.get("executionTime", 0))

            @client.on("error")
            async def on_error(data):
                if self._accepts(client, data):
                    result = self._current_result
                    result.error = str(data)
                    result.end_time = time.time()
                    result.execution_time_ms = (result.end_time - result.start_time) * 1000
                    self._execution_complete.set()

            await client.connect(self.server_url)
            return True
        except (sio_exceptions.ConnectionError, OSError) as e:
            print(f"  [{self.worker_id}] Connection failed: {e}")
            return False

    async def disconnect(self):
        """Disconnect from server"""
        if self.sio and self.sio.connected:
            await self.sio.disconnect()

    async def _reconnect(self):
        """Drop the client so late replies to an abandoned run are discarded"""
        await self.disconnect()
        await self.connect()

    async def run_program(self, program: dict, timeout: float = 30.0) -> ExecutionResult:
        """Run a single program"""
        self._output_buffer = ""
        self._execution_complete.clear()
        self.session_id = self._new_session_id()

        result = ExecutionResult(
            worker_id=self.worker_id,
            session_id=self.session_id,
            backend=self.backend,
            program_name=program["name"],
            category=program.get("category", "unknown"),
            success=False,
            start_time=time.time(),
            end_time=0,
            execution_time_ms=0,
        )
        self._current_result = result
        timed_out = False

        try:
            with open(program["path"], encoding="utf-8") as f:
                source = f.read()

            await self.sio.emit(
                "run",
                {
                    "sessionId": self.session_id,
                    "language": "python",
                    "files": [
                        {
                            "name": "main.py",
                            "path": "main.py",
                            "content": source,
                            "toBeExec": True,
                        }
                    ],
                },
            )

            try:
                await asyncio.wait_for(self._execution_complete.wait(), timeout=timeout)
            except asyncio.TimeoutError:
                timed_out = True
                result.error = "Execution timeout"
                result.end_time = time.time()
                result.execution_time_ms = (result.end_time - result.start_time) * 1000

        except (OSError, sio_exceptions.SocketIOError) as e:
            result.error = str(e)
            result.end_time = time.time()
            result.execution_time_ms = (result.end_time - result.start_time) * 1000
        finally:
            self._current_result = None

        if timed_out:
            await self._reconnect()

        return result


# =============================================================================
# Check Runner
# =============================================================================


class FlowCheckRunner:
    """Runs every selected program and checks its transcript"""

    def __init__(
        self,
        programs: list[dict],
        backend: str = "local",
        server_url: Optional[str] = None,
        repeat: int = 1,
        concurrency: int = 2,
        timeout: float = 30.0,
        output_dir: Optional[str] = "./reports",
    ):
        if backend == "remote" and not server_url:
            raise ValueError("A server URL is required for the remote backend")
        if repeat < 1 or concurrency < 1:
            raise ValueError("repeat and concurrency must be at least 1")
        self.programs = programs
        self.backend = backend
        self.server_url = server_url
        self.repeat = repeat
        self.concurrency = concurrency
        self.timeout = timeout
        self.output_dir = output_dir
        self.check_id = f"flowcheck-{datetime.now().strftime('%Y%m%d-%H%M%S')}"
        self.executors: list = []
        self.all_results: list[ExecutionResult] = []
        self.not_run: list[dict] = []

    def _make_executor(self, worker_id: str):
        if self.backend == "remote":
            return RemoteExecutor(worker_id, self.server_url)
        return LocalExecutor(worker_id)

    def _assign_jobs(self) -> asyncio.Queue:
        """Queue every program once per repetition"""
        queue: asyncio.Queue = asyncio.Queue()
        for _ in range(self.repeat):
            for program in self.programs:
                queue.put_nowait(program)
        return queue

    async def run_check(self) -> CheckReport:
        """Run the complete check"""
        print(f"\n{'='*60}")
        print(f"  Control Flow Transcript Check")
        print(f"  Check ID: {self.check_id}")
        print(f"  Backend: {self.backend.upper()}")
        if self.server_url:
            print(f"  Server: {self.server_url}")
        print(f"  Programs: {', '.join(p['name'] for p in self.programs)}")
        print(f"  Repeat: {self.repeat}  Concurrency: {self.concurrency}")
        print(f"{'='*60}\n")

        start_time = time.time()
        start_time_str = datetime.now().isoformat()

        print(f"[1/3] Starting {self.concurrency} workers...")
        self.executors = [
            self._make_executor(f"worker-{i+1:02d}") for i in range(self.concurrency)
        ]
        connect_results = await asyncio.gather(
            *(e.connect() for e in self.executors), return_exceptions=True
        )
        connected_count = sum(1 for r in connect_results if r is True)
        print(f"       Connected: {connected_count}/{self.concurrency}")

        print("[2/3] Running programs...")
        queue = self._assign_jobs()
        workers = [self._worker(e, queue) for e in self.executors if e.connected]
        await asyncio.gather(*workers)

        # Left over when no worker could connect
        while not queue.empty():
            self.not_run.append(queue.get_nowait())

        print("[3/3] Collecting results...")
        await asyncio.gather(
            *(e.disconnect() for e in self.executors), return_exceptions=True
        )

        end_time = time.time()
        end_time_str = datetime.now().isoformat()

        report = self._generate_report(
            start_time_str, end_time_str, end_time - start_time
        )

        if self.output_dir:
            self._save_reports(report)

        return report

    async def _worker(self, executor, queue: asyncio.Queue):
        """Drain the job queue with one executor"""
        while True:
            try:
                program = queue.get_nowait()
            except asyncio.QueueEmpty:
                return
            result = await executor.run_program(program, timeout=self.timeout)
            evaluate(result, program)
            self.all_results.append(result)
            status = "✓" if result.success else "✗"
            detail = result.error or (
                f"{len(result.mismatches)} mismatched line(s)" if result.mismatches else ""
            )
            print(
                f"  [{executor.worker_id}] {status} {program['name']} - {result.execution_time_ms:.0f}ms"
                + (f" ({detail})" if detail else "")
            )

    def _generate_report(
        self, start_time: str, end_time: str, duration: float
    ) -> CheckReport:
        """Generate the summary report"""
        passed = [r for r in self.all_results if r.success]

        exec_times = [
            r.execution_time_ms for r in self.all_results if r.execution_time_ms > 0
        ]

        by_program = {}
        by_category = {}
        # Jobs that never ran because no worker could connect count as failures
        outcomes = [(r.program_name, r.category, r.success) for r in self.all_results]
        outcomes += [(p["name"], p.get("category", "unknown"), False) for p in self.not_run]
        for name, category, success in outcomes:
            for key, groups in ((name, by_program), (category, by_category)):
                if key not in groups:
                    groups[key] = {"total": 0, "passed": 0, "failed": 0}
                groups[key]["total"] += 1
                if success:
                    groups[key]["passed"] += 1
                else:
                    groups[key]["failed"] += 1

        return CheckReport(
            check_id=self.check_id,
            start_time=start_time,
            end_time=end_time,
            duration_seconds=duration,
            backend=self.backend,
            server_url=self.server_url,
            repeat=self.repeat,
            concurrency=self.concurrency,
            total_executions=len(outcomes),
            passed_executions=len(passed),
            failed_executions=len(outcomes) - len(passed),
            avg_execution_time_ms=(
                sum(exec_times) / len(exec_times) if exec_times else 0
            ),
            min_execution_time_ms=min(exec_times) if exec_times else 0,
            max_execution_time_ms=max(exec_times) if exec_times else 0,
            executions_by_program=by_program,
            executions_by_category=by_category,
            execution_results=[asdict(r) for r in self.all_results],
        )

    def _save_reports(self, report: CheckReport):
        """Save JSON and HTML reports"""
        os.makedirs(self.output_dir, exist_ok=True)

        json_path = os.path.join(self.output_dir, f"{self.check_id}.json")
        with open(json_path, "w") as f:
            json.dump(asdict(report), f, indent=2)
        print(f"\n  JSON Report: {json_path}")

        html_path = os.path.join(self.output_dir, f"{self.check_id}.html")
        with open(html_path, "w") as f:
            f.write(render_html_report(report))
        print(f"  HTML Report: {html_path}")


# =============================================================================
# HTML Report
# =============================================================================


def _group_rows(groups: dict) -> str:
    rows = ""
    for name, stats in groups.items():
        rate = (stats["passed"] / stats["total"] * 100) if stats["total"] > 0 else 0
        rows += f"""                <tr>
                    <td>{html.escape(name)}</td>
                    <td>{stats['total']}</td>
                    <td>{stats['passed']}</td>
                    <td>{stats['failed']}</td>
                    <td><span class="badge {'badge-success' if rate == 100 else 'badge-error'}">{rate:.0f}%</span></td>
                </tr>
"""
    return rows


def render_html_report(report: CheckReport) -> str:
    """Render the report as a standalone HTML page"""
    pass_rate = (
        (report.passed_executions / report.total_executions * 100)
        if report.total_executions > 0
        else 0
    )

    page = f"""<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>Transcript Check Report - {report.check_id}</title>
    <style>
        * {{ margin: 0; padding: 0; box-sizing: border-box; }}
        body {{ font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, sans-serif; background: #1a1a2e; color: #eee; padding: 20px; }}
        .container {{ max-width: 1200px; margin: 0 auto; }}
        h1 {{ color: #00d4ff; margin-bottom: 10px; }}
        h2 {{ color: #00d4ff; margin: 20px 0 10px; border-bottom: 1px solid #333; padding-bottom: 5px; }}
        .meta {{ color: #888; font-size: 14px; }}
        .grid {{ display: grid; grid-template-columns: repeat(auto-fit, minmax(200px, 1fr)); gap: 20px; margin: 20px 0; }}
        .card {{ background: #16213e; padding: 20px; border-radius: 8px; }}
        .card-title {{ color: #888; font-size: 12px; text-transform: uppercase; margin-bottom: 5px; }}
        .card-value {{ font-size: 28px; font-weight: bold; }}
        .card-value.success {{ color: #00ff88; }}
        .card-value.error {{ color: #ff4444; }}
        table {{ width: 100%; border-collapse: collapse; margin: 10px 0; }}
        th, td {{ padding: 10px; text-align: left; border-bottom: 1px solid #333; }}
        th {{ color: #00d4ff; }}
        pre {{ white-space: pre-wrap; font-size: 12px; }}
        .badge {{ display: inline-block; padding: 2px 8px; border-radius: 4px; font-size: 12px; }}
        .badge-success {{ background: #00ff8833; color: #00ff88; }}
        .badge-error {{ background: #ff444433; color: #ff4444; }}
    </style>
</head>
<body>
    <div class="container">
        <h1>Control Flow Transcript Check</h1>
        <p class="meta">Check ID: {report.check_id} | Duration: {report.duration_seconds:.1f}s | Backend: {report.backend}</p>

        <div class="grid">
            <div class="card">
                <div class="card-title">Total Executions</div>
                <div class="card-value">{report.total_executions}</div>
            </div>
            <div class="card">
                <div class="card-title">Pass Rate</div>
                <div class="card-value {'success' if pass_rate == 100 else 'error'}">{pass_rate:.1f}%</div>
            </div>
            <div class="card">
                <div class="card-title">Avg Execution Time</div>
                <div class="card-value">{report.avg_execution_time_ms:.0f}ms</div>
            </div>
        </div>

        <h2>Results by Program</h2>
        <table>
            <thead><tr><th>Program</th><th>Total</th><th>Passed</th><th>Failed</th><th>Rate</th></tr></thead>
            <tbody>
{_group_rows(report.executions_by_program)}            </tbody>
        </table>

        <h2>Results by Category</h2>
        <table>
            <thead><tr><th>Category</th><th>Total</th><th>Passed</th><th>Failed</th><th>Rate</th></tr></thead>
            <tbody>
{_group_rows(report.executions_by_category)}            </tbody>
        </table>

        <h2>Execution Details</h2>
        <table>
            <thead><tr><th>Worker</th><th>Program</th><th>Status</th><th>Time</th><th>Mismatches</th></tr></thead>
            <tbody>
"""
    for r in report.execution_results:
        status_badge = "badge-success" if r["success"] else "badge-error"
        status_text = "✓ Passed" if r["success"] else "✗ Failed"
        if r["error"]:
            details = html.escape(r["error"])
        else:
            details = "\n".join(
                f"line {m['line']}: expected {m['expected']!r}, got {m['actual']!r}"
                for m in r["mismatches"]
            )
            details = html.escape(details)
        page += f"""                <tr>
                    <td>{r['worker_id']}</td>
                    <td>{html.escape(r['program_name'])}</td>
                    <td><span class="badge {status_badge}">{status_text}</span></td>
                    <td>{r['execution_time_ms']:.0f}ms</td>
                    <td><pre>{details}</pre></td>
                </tr>
"""

    page += """            </tbody>
        </table>
    </div>
</body>
</html>
"""
    return page


# =============================================================================
# Main Entry Point
# =============================================================================


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Control Flow Transcript Checker")
    parser.add_argument(
        "--program",
        "-p",
        action="append",
        choices=[p["name"] for p in PROGRAMS],
        help="Program to check; may be repeated (default: all)",
    )
    parser.add_argument(
        "--backend",
        "-b",
        type=str,
        choices=["local", "remote"],
        default="local",
        help="Run programs in a local subprocess or on a CodeRunner server (default: local)",
    )
    parser.add_argument(
        "--server",
        "-s",
        type=str,
        default="http://localhost:3000",
        help="Server URL for the remote backend (default: http://localhost:3000)",
    )
    parser.add_argument(
        "--repeat",
        "-r",
        type=int,
        default=1,
        help="Number of times to run each program (default: 1)",
    )
    parser.add_argument(
        "--concurrency",
        "-c",
        type=int,
        default=2,
        help="Number of programs running at once (default: 2)",
    )
    parser.add_argument(
        "--timeout",
        "-t",
        type=float,
        default=30.0,
        help="Seconds before an execution is abandoned (default: 30)",
    )
    parser.add_argument(
        "--output",
        "-o",
        type=str,
        default="./reports",
        help="Output directory for reports (default: ./reports)",
    )
    parser.add_argument(
        "--no-report",
        action="store_true",
        help="Skip writing JSON and HTML reports",
    )
    parser.add_argument(
        "--list",
        action="store_true",
        help="List available programs and exit",
    )
    return parser


async def main(argv: Optional[list] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.list:
        for program in PROGRAMS:
            print(f"{program['name']:<16} {program['category']:<14} {program['path']}")
        return 0

    try:
        runner = FlowCheckRunner(
            programs=find_programs(args.program),
            backend=args.backend,
            server_url=args.server if args.backend == "remote" else None,
            repeat=args.repeat,
            concurrency=args.concurrency,
            timeout=args.timeout,
            output_dir=None if args.no_report else args.output,
        )
    except ValueError as e:
        parser.error(str(e))

    try:
        report = await runner.run_check()

        print(f"\n{'='*60}")
        print(f"  Check Complete!")
        print(
            f"  Passed: {report.passed_executions}/{report.total_executions} ({report.passed_executions/report.total_executions*100:.1f}%)"
            if report.total_executions > 0
            else "  No executions"
        )
        print(f"  Avg Execution Time: {report.avg_execution_time_ms:.0f}ms")
        print(f"{'='*60}\n")

    except Exception as e:
        print(f"\nCheck failed: {e}")
        raise

    if report.total_executions == 0 or report.failed_executions:
        return 1
    return 0


def cli():
    try:
        code = asyncio.run(main())
    except KeyboardInterrupt:
        print("\n\nCheck interrupted by user.")
        code = 130
    sys.exit(code)


if __name__ == "__main__":
    cli()
