"""
控制台交互脚本：连接正在运行的 Todo 服务，逐条调用 HTTP 接口

运行方式：
    python -m app.console [--base-url http://127.0.0.1:8000]

支持命令：
    /list [all|active|completed]  — 查看列表（行号从 1 开始）
    /add <内容>                   — 新增
    /edit <行号> <内容>           — 修改
    /toggle <行号>                — 切换完成状态
    /rm <行号>                    — 删除
    /toggle_all                   — 全部完成 / 全部取消
    /clear                        — 清除已完成
    /quit                         — 退出

行号对应最近一次 /list 的结果，增删改之后会自动刷新。
"""

import argparse

import httpx
from prompt_toolkit import PromptSession

HELP = "命令: /list [filter] | /add <内容> | /edit <n> <内容> | /toggle <n> | /rm <n> | /toggle_all | /clear | /quit"


class ConsoleError(Exception):
    """命令格式错误或行号越界"""


class TodoConsole:
    """把控制台命令翻译成 HTTP 调用，client 可以是任意 httpx.Client（测试里用 TestClient）"""

    def __init__(self, client: httpx.Client):
        self.client = client
        self.rows: list[dict] = []
        self.filter = "all"

    def _row_id(self, arg: str) -> str:
        try:
            n = int(arg)
        except ValueError:
            raise ConsoleError(f"行号必须是数字: {arg}") from None
        if not 1 <= n <= len(self.rows):
            raise ConsoleError(f"行号超出范围: {n}（当前共 {len(self.rows)} 条）")
        return self.rows[n - 1]["id"]

    def _post(self, path: str, body: dict | None = None) -> dict:
        resp = self.client.post(path, json=body) if body is not None else self.client.post(path)
        resp.raise_for_status()
        data = resp.json()
        if not data["success"]:
            raise ConsoleError(data["message"])
        return data

    def refresh(self, filter: str | None = None) -> list[dict]:
        if filter:
            self.filter = filter
        resp = self.client.get("/todos", params={"filter": self.filter})
        resp.raise_for_status()
        self.rows = resp.json()["data"]
        return self.rows

    def render(self) -> str:
        if not self.rows:
            return "  （空）"
        return "\n".join(
            f"  {i}. [{'x' if row['completed'] else ' '}] {row['content']}"
            for i, row in enumerate(self.rows, start=1)
        )

    def handle(self, line: str) -> str:
        """执行一条命令，返回要打印的文本"""
        cmd, _, rest = line.strip().partition(" ")
        rest = rest.strip()

        if cmd == "/list":
            self.refresh(rest or None)
            return self.render()
        if cmd == "/add":
            if not rest:
                raise ConsoleError("用法: /add <内容>")
            self._post("/add_todo", {"content": rest})
        elif cmd == "/edit":
            arg, _, content = rest.partition(" ")
            if not content.strip():
                raise ConsoleError("用法: /edit <行号> <内容>")
            self._post("/update_todo", {"todo_id": self._row_id(arg), "content": content.strip()})
        elif cmd == "/toggle":
            self._post("/toggle_todo", {"todo_id": self._row_id(rest)})
        elif cmd == "/rm":
            self._post("/remove_todo", {"todo_id": self._row_id(rest)})
        elif cmd == "/toggle_all":
            self._post("/toggle_all")
        elif cmd == "/clear":
            self._post("/clear_completed")
        else:
            raise ConsoleError(HELP)

        self.refresh()
        return self.render()


def main() -> None:
    """交互式主循环"""
    parser = argparse.ArgumentParser(description="Todo 服务控制台")
    parser.add_argument("--base-url", default="http://127.0.0.1:8000")
    args = parser.parse_args()

    print("=" * 60)
    print("  Todo 控制台")
    print(f"  服务地址: {args.base_url}")
    print(f"  {HELP}")
    print("=" * 60)

    pt_session = PromptSession()
    with httpx.Client(base_url=args.base_url, timeout=5) as client:
        console = TodoConsole(client)
        while True:
            try:
                line = pt_session.prompt("todo> ").strip()
            except (EOFError, KeyboardInterrupt):
                print("\n再见！")
                break

            if not line:
                continue
            if line == "/quit":
                print("再见！")
                break

            try:
                print(console.handle(line) + "\n")
            except ConsoleError as e:
                print(f"\033[93m  {e}\033[0m\n")
            except httpx.HTTPError as e:
                print(f"\033[31m  请求失败: {e}\033[0m\n")


if __name__ == "__main__":
    main()
