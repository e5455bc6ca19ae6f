import asyncio
import sys
from langchain_openai import ChatOpenAI
from langgraph.prebuilt import create_react_agent
from langchain_mcp_adapters.client import MultiServerMCPClient
from dotenv import load_dotenv
import langchain

load_dotenv()

SERVERS = {
    "netsuite": {
        "command": sys.executable,
        "args": ["-m", "servers.netsuite_server"],
        "transport": "stdio",
    }
}

async def run_query(user_query: str, debug: bool = False):
    print(f"▶ User Query: {user_query}")

    client = MultiServerMCPClient(SERVERS)
    tools = await client.get_tools()
    print("Loaded tools:", ", ".join(tool.name for tool in tools))

    model = ChatOpenAI(model="gpt-4o", temperature=0)
    agent_executor = create_react_agent(model, tools)

    langchain.debug = debug

    print("\nAgent is thinking...")
    result = await agent_executor.ainvoke({"messages": [("user", user_query)]})

    langchain.debug = False

    final_answer = result['messages'][-1].content
    print("\nFinal Answer:")
    print(final_answer)
    return final_answer


if __name__ == "__main__":
    query = " ".join(sys.argv[1:]) or "List the five most recently created customers with their email addresses."

    asyncio.run(run_query(query))
